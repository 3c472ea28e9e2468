# __init__.py - indicates that this directory is a Python package
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
"""Unit tests for Flask-HALRest.

The modules :mod:`test_routing`, :mod:`test_identifiers`,
:mod:`test_links`, :mod:`test_extractors`, :mod:`test_model` and
:mod:`test_renderer` test the link resolution and rendering engine in
isolation. The modules :mod:`test_controller` and :mod:`test_manager`
test resources exposed at parent and child routes of a Flask
application.

Run the full test suite from the command-line using ``pytest``.

"""
