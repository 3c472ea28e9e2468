# test_manager.py - unit tests for the HALManager class
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
"""Unit tests for the :class:`flask_halrest.HALManager` class, which
exercise the views through the Flask test client.

"""
from pytest import raises

from flask_halrest import Entity
from flask_halrest import HALManager
from flask_halrest import HAL_MIMETYPE
from flask_halrest import IllegalArgumentError
from flask_halrest import ProcessingException
from flask_halrest import Resource
from flask_halrest import RouteRegistry
from flask_halrest import UnknownRouteError

from .helpers import ALTERNATE_ROUTES
from .helpers import CHILDREN
from .helpers import FlaskTestBase
from .helpers import ManagerTestBase
from .helpers import SERVER_URL
from .helpers import check_problem
from .helpers import loads
from .helpers import person


def fetch_child(identifier, route_match):
    # Only Anakin has children.
    if route_match.get('id') != 'anakin':
        return None
    for id_, name in CHILDREN:
        if id_ == identifier:
            return person(id_, name)
    return None


def fetch_children(route_match):
    if route_match.get('id') != 'anakin':
        return []
    return [person(id_, name) for id_, name in CHILDREN]


class TestChildResources(ManagerTestBase):
    """Tests for fetching child resources through the Flask
    application.

    """

    def setup_method(self):
        super(TestChildResources, self).setup_method()
        self.manager.create_resource('parent/child', fetch=fetch_child,
                                     fetch_all=fetch_children,
                                     route_identifier_name='child_id',
                                     collection_name='children')

    def test_get_entity(self):
        response = self.app.get('/api/parent/anakin/child/luke')
        assert response.status_code == 200
        assert response.mimetype == HAL_MIMETYPE
        document = loads(response.data)
        assert document['id'] == 'luke'
        assert document['name'] == 'Luke Skywalker'
        assert document['_links']['self']['href'] == \
            SERVER_URL + '/api/parent/anakin/child/luke'

    def test_get_collection(self):
        response = self.app.get('/api/parent/anakin/child')
        assert response.status_code == 200
        assert response.mimetype == HAL_MIMETYPE
        document = loads(response.data)
        assert document['_links']['self']['href'] == \
            SERVER_URL + '/api/parent/anakin/child'
        children = document['_embedded']['children']
        assert [child['id'] for child in children] == ['luke', 'leia']
        assert children[1]['_links']['self']['href'] == \
            SERVER_URL + '/api/parent/anakin/child/leia'
        assert document['total_items'] == 2
        assert document['page'] == 1

    def test_empty_collection(self):
        response = self.app.get('/api/parent/padme/child')
        assert response.status_code == 200
        document = loads(response.data)
        assert document['_embedded']['children'] == []
        assert document['page_count'] == 1

    def test_not_found(self):
        response = self.app.get('/api/parent/anakin/child/han')
        document = check_problem(response, 404, ['han', 'parent/child'])
        assert document['kind'] == 'ProcessingException'

    def test_page(self):
        self.manager.controller_for('parent/child').page_size = 1
        response = self.app.get('/api/parent/anakin/child?page=2')
        assert response.status_code == 200
        document = loads(response.data)
        children = document['_embedded']['children']
        assert [child['id'] for child in children] == ['leia']
        links = document['_links']
        base = SERVER_URL + '/api/parent/anakin/child'
        assert links['prev']['href'] == base + '?page=1'
        assert 'next' not in links

    def test_page_out_of_range(self):
        response = self.app.get('/api/parent/anakin/child?page=5')
        check_problem(response, 409, 'Invalid page provided')

    def test_bad_page(self):
        response = self.app.get('/api/parent/anakin/child?page=bogus')
        check_problem(response, 400, 'bogus')
        response = self.app.get('/api/parent/anakin/child?page=0')
        check_problem(response, 400)

    def test_method_not_allowed(self):
        response = self.app.post('/api/parent/anakin/child')
        assert response.status_code == 405

    def test_registry_replaced(self):
        """Tests that a request is answered with a 404 problem if the
        registry of the manager no longer has a matching route.

        """
        self.manager.registry = RouteRegistry()
        response = self.app.get('/api/parent/anakin/child/luke')
        document = check_problem(response, 404)
        assert document['kind'] == 'NoMatchError'


class TestManager(ManagerTestBase):
    """Tests for creating resources and for error responses."""

    def test_unknown_route(self):
        with raises(UnknownRouteError):
            self.manager.create_resource('bogus', fetch=fetch_child)

    def test_resource_and_callbacks(self):
        with raises(IllegalArgumentError):
            self.manager.create_resource('parent', resource=Resource(),
                                         fetch=fetch_child)

    def test_collection_name(self):
        self.manager.create_resource('parent/child', fetch=fetch_child)
        controller = self.manager.controller_for('parent/child')
        assert controller.collection_name == 'child'

    def test_missing_callback(self):
        self.manager.create_resource('parent/child', fetch=fetch_child,
                                     route_identifier_name='child_id')
        response = self.app.get('/api/parent/anakin/child')
        check_problem(response, 405)

    def test_processing_exception(self):
        def fetch(identifier, route_match):
            raise ProcessingException(status=403, title='Forbidden fruit',
                                      detail='Not allowed')

        self.manager.create_resource('parent', fetch=fetch)
        response = self.app.get('/api/parent/anakin')
        document = check_problem(response, 403, 'Not allowed')
        assert document['title'] == 'Forbidden fruit'
        assert document['kind'] == 'ProcessingException'

    def test_broken_link(self):
        """Tests that an entity whose self link cannot be built yields an
        error response instead of a partial document.

        """
        self.manager.create_resource('parent/child', fetch=fetch_child,
                                     route_identifier_name='child_id',
                                     entity_route='bogus')
        response = self.app.get('/api/parent/anakin/child/luke')
        document = check_problem(response, 500, ['self', 'luke'])
        assert document['kind'] == 'LinkResolutionError'
        assert '_links' not in document

    def test_cached_entities(self):
        """Tests that children served from the same cached entities to two
        different parents have self links under the requested parent.

        """
        cached = [Entity(dict(id='luke'), 'luke')]
        self.manager.create_resource('parent/child',
                                     fetch_all=lambda route_match: cached,
                                     route_identifier_name='child_id',
                                     collection_name='children')
        for parent in ('anakin', 'vader'):
            response = self.app.get('/api/parent/{0}/child'.format(parent))
            document = loads(response.data)
            child = document['_embedded']['children'][0]
            expected = '{0}/api/parent/{1}/child/luke'.format(SERVER_URL,
                                                              parent)
            assert child['_links']['self']['href'] == expected

    def test_unserializable_payload(self):
        """Tests that a payload value which cannot be serialized as JSON
        yields a problem response instead of an HTML error page.

        """
        def fetch(identifier, route_match):
            return dict(id=identifier, tags={'jedi'})

        self.manager.create_resource('parent', fetch=fetch)
        response = self.app.get('/api/parent/anakin')
        document = check_problem(response, 500, 'set')
        assert document['kind'] == 'SerializationException'

    def test_parent_resource(self):
        def fetch(identifier, route_match):
            return dict(id=identifier, name='Anakin Skywalker')

        self.manager.create_resource('parent', fetch=fetch)
        response = self.app.get('/api/parent/anakin')
        assert response.status_code == 200
        document = loads(response.data)
        assert document['_links']['self']['href'] == \
            SERVER_URL + '/api/parent/anakin'


class TestConfiguration(FlaskTestBase):
    """Tests for the configuration of a manager."""

    def test_init_app(self):
        """Tests that resources created before an application is bound
        are registered when it is.

        """
        manager = HALManager(routes=ALTERNATE_ROUTES)
        manager.create_resource('parent/child', fetch=fetch_child,
                                fetch_all=fetch_children,
                                route_identifier_name='child_id')
        assert manager.controllers == {}
        manager.init_app(self.flaskapp)
        assert 'parent/child' in manager.controllers
        response = self.app.get('/api/parent/anakin/child/luke')
        assert response.status_code == 200

    def test_registry(self):
        registry = RouteRegistry.from_config(ALTERNATE_ROUTES)
        manager = HALManager(self.flaskapp, registry=registry)
        assert manager.registry is registry

    def test_server_name(self):
        self.flaskapp.config['HALREST_URL_SCHEME'] = 'https'
        self.flaskapp.config['HALREST_SERVER_NAME'] = 'api.example.com'
        manager = HALManager(self.flaskapp, routes=ALTERNATE_ROUTES)
        manager.create_resource('parent/child', fetch=fetch_child,
                                route_identifier_name='child_id')
        response = self.app.get('/api/parent/anakin/child/luke')
        document = loads(response.data)
        assert document['_links']['self']['href'] == \
            'https://api.example.com/api/parent/anakin/child/luke'

    def test_constructor_overrides_config(self):
        self.flaskapp.config['HALREST_SERVER_NAME'] = 'api.example.com'
        manager = HALManager(self.flaskapp, routes=ALTERNATE_ROUTES,
                             host='other.example.com')
        manager.create_resource('parent/child', fetch=fetch_child,
                                route_identifier_name='child_id')
        response = self.app.get('/api/parent/anakin/child/luke')
        document = loads(response.data)
        assert document['_links']['self']['href'] == \
            'http://other.example.com/api/parent/anakin/child/luke'

    def test_page_size(self):
        self.flaskapp.config['HALREST_PAGE_SIZE'] = 1
        manager = HALManager(self.flaskapp, routes=ALTERNATE_ROUTES)
        manager.create_resource('parent/child', fetch_all=fetch_children,
                                route_identifier_name='child_id',
                                collection_name='children')
        response = self.app.get('/api/parent/anakin/child')
        document = loads(response.data)
        assert len(document['_embedded']['children']) == 1
        assert document['page_count'] == 2
        assert document['_links']['next']['href'] == \
            SERVER_URL + '/api/parent/anakin/child?page=2'
