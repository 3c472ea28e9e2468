# setup.py - packaging and distribution configuration for Flask-HALRest
#
# Copyright 2011 Lincoln de Sousa <lincoln@comum.org>.
# Copyright 2012, 2013, 2014, 2015, 2016 Jeffrey Finkelstein
#           <jeffrey.finkelstein@gmail.com> and contributors.
#
# This file is part of Flask-HALRest.
#
# Flask-HALRest is distributed under both the GNU Affero General Public
# License version 3 and under the 3-clause BSD license. For more
# information, see LICENSE.AGPL and LICENSE.BSD.
"""Flask-HALRest is a `Flask`_ extension that exposes resources at
hierarchical named routes and renders them as `HAL`_ documents, with
canonical ``_links`` and ``_embedded`` elements.

Resources are defined by ``fetch`` and ``fetch_all`` callbacks; parent
route parameters are propagated into the links of child resources.

.. _Flask: http://flask.pocoo.org
.. _HAL: https://tools.ietf.org/html/draft-kelly-json-hal

"""
import codecs
import os.path
import re
from setuptools import setup, find_packages

#: A regular expression capturing the version number from Python code.
VERSION_RE = r"^__version__ = ['\"]([^'\"]*)['\"]"

#: The installation requirements for Flask-HALRest.
REQUIREMENTS = ['flask>=2.2', 'werkzeug>=2.2']

#: The requirements for running the unit tests.
TEST_REQUIREMENTS = ['pytest']

#: The absolute path to this file.
HERE = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    """Reads the entire contents of the file whose path is given as `parts`."""
    with codecs.open(os.path.join(HERE, *parts), 'r') as f:
        return f.read()


def find_version(*file_path):
    """Returns the version number appearing in the file in the given file
    path.

    Each positional argument indicates a member of the path.

    """
    version_file = read(*file_path)
    version_match = re.search(VERSION_RE, version_file, re.MULTILINE)
    if version_match:
        return version_match.group(1)
    raise RuntimeError('Unable to find version string.')


setup(
    author='Jeffrey Finkelstein',
    author_email='jeffrey.finkelstein@gmail.com',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Framework :: Flask',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        ('License :: OSI Approved :: '
         'GNU Affero General Public License v3 or later (AGPLv3+)'),
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    description=('Flask extension for rendering hierarchical resources as'
                 ' HAL documents'),
    extras_require={'test': TEST_REQUIREMENTS},
    install_requires=REQUIREMENTS,
    include_package_data=True,
    keywords=['ReST', 'API', 'Flask', 'HAL'],
    license='GNU AGPLv3+ or BSD',
    long_description=__doc__,
    name='Flask-HALRest',
    platforms='any',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    version=find_version('flask_halrest', '__init__.py'),
    zip_safe=False
)
