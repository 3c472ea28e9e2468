# helpers.py - helper functions for unit tests
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
"""Helper functions and fixtures for unit tests."""
from types import SimpleNamespace

from flask import Flask
from flask import json

from flask_halrest import HALManager
from flask_halrest import HalJsonRenderer
from flask_halrest import LinkCollectionExtractor
from flask_halrest import LinkExtractor
from flask_halrest import LinkUrlBuilder
from flask_halrest import RouteRegistry

loads = json.loads

#: The scheme and host of every URL built in the tests.
SERVER_URL = 'http://localhost.localdomain'

#: Routes in which the parent and child declare differently named
#: parameters, ``parent`` and ``child``.
ROUTES = {
    'parent': {
        'route': '/api/parent[/:parent]',
        'defaults': {'controller': 'Api\\ParentController'},
        'child_routes': {
            'child': {
                'route': '/child[/:child]',
                'defaults': {'controller': 'Api\\ChildController'},
            },
        },
    },
}

#: Routes in which the parent declares the generic ``id`` parameter and
#: the child declares ``child_id``.
ALTERNATE_ROUTES = {
    'parent': {
        'route': '/api/parent[/:id]',
        'defaults': {'controller': 'Api\\ParentController'},
        'child_routes': {
            'child': {
                'route': '/child[/:child_id]',
                'defaults': {'controller': 'Api\\ChildController'},
            },
        },
    },
}

#: The children of Anakin Skywalker, as ``(id, name)`` pairs.
CHILDREN = [('luke', 'Luke Skywalker'), ('leia', 'Leia Organa')]


def person(id_, name):
    """Returns a domain object with the given identifier and name."""
    return SimpleNamespace(id=id_, name=name)


def make_renderer(registry, max_depth=None):
    """Returns a renderer whose links are built against `registry` with
    the server URL :data:`SERVER_URL`.

    """
    builder = LinkUrlBuilder(registry, 'http', 'localhost.localdomain')
    extractor = LinkCollectionExtractor(LinkExtractor(builder))
    return HalJsonRenderer(extractor, max_depth=max_depth)


def check_problem(response, status, strings=()):
    """Asserts that the response is an API Problem response with the
    given status whose detail message contains all of the given strings.

    `strings` may also be a single string object to check.

    """
    if isinstance(strings, str):
        strings = [strings]
    assert response.status_code == status
    assert response.mimetype == 'application/problem+json'
    document = loads(response.data)
    assert document['status'] == status
    assert all(s in document['detail'] for s in strings)
    return document


class RegistryTestBase(object):
    """Base class for tests that need a route registry.

    The registry built from :data:`ROUTES` is accessible at
    ``self.registry``.

    """

    #: The route configuration from which the registry is built.
    routes = ROUTES

    def setup_method(self):
        self.registry = RouteRegistry.from_config(self.routes)
        self.renderer = make_renderer(self.registry)


class FlaskTestBase(object):
    """Base class for tests which use a Flask application.

    The Flask test client can be accessed at ``self.app``. The Flask
    application itself is accessible at ``self.flaskapp``.

    """

    def setup_method(self):
        """Creates the Flask application."""
        app = Flask(__name__)
        app.config['DEBUG'] = True
        app.config['TESTING'] = True
        # This determines the host of the absolute URLs in links.
        app.config['SERVER_NAME'] = 'localhost.localdomain'
        app.logger.disabled = True
        self.flaskapp = app

        # create the test client
        self.app = app.test_client()


class ManagerTestBase(FlaskTestBase):
    """Base class for tests that use a :class:`~flask_halrest.HALManager`.

    The manager, whose registry is built from :attr:`routes`, is
    accessible at ``self.manager``.

    """

    routes = ALTERNATE_ROUTES

    def setup_method(self):
        super(ManagerTestBase, self).setup_method()
        self.manager = HALManager(self.flaskapp, routes=self.routes)
