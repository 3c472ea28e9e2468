# manager.py - class that exposes resources as HAL endpoints
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
"""Provides the main class with which users of Flask-HALRest interact.

The :class:`HALManager` class allows users to expose resources at
hierarchical named routes of a Flask application.

"""
from flask import current_app
from flask import request

from .controller import ResourceController
from .extractors import LinkCollectionExtractor
from .extractors import LinkExtractor
from .links import LinkUrlBuilder
from .model import DEFAULT_PAGE_SIZE
from .renderer import HalJsonRenderer
from .resource import Resource
from .routing import RouteRegistry
from .views import ResourceView

#: The names of HTTP methods that allow fetching information.
READONLY_METHODS = frozenset(('GET', ))


class IllegalArgumentError(Exception):
    """This exception is raised when a calling function has provided illegal
    arguments to a function or method.

    """
    pass


class HALManager(object):
    """Provides a method for exposing resources as HAL endpoints of a
    given :class:`~flask.Flask` application.

    The :class:`~flask.Flask` object can either be specified in the
    constructor, or after instantiation time by calling the
    :meth:`init_app` method.

    `registry` is the :class:`~flask_halrest.routing.RouteRegistry`
    holding the named routes. If it is not specified, an empty registry
    is created. `routes` is an optional dictionary of routes to add to
    the registry, as accepted by
    :meth:`~flask_halrest.routing.RouteRegistry.add_routes`.

    `url_scheme` and `host` form the server URL prefixing every link.
    When not specified, they are read from the ``HALREST_URL_SCHEME``
    and ``HALREST_SERVER_NAME`` configuration values of the application,
    and failing that from the current request.

    `max_depth` is passed on to the
    :class:`~flask_halrest.renderer.HalJsonRenderer`.

    For example::

        from flask import Flask
        from flask_halrest import HALManager

        routes = {
            'parent': {
                'route': '/api/parent[/:id]',
                'child_routes': {
                    'child': {'route': '/child[/:child_id]'},
                },
            },
        }
        app = Flask(__name__)
        manager = HALManager(app, routes=routes)
        manager.create_resource('parent/child', fetch=fetch_child,
                                fetch_all=fetch_children,
                                route_identifier_name='child_id',
                                collection_name='children')

    """

    def __init__(self, app=None, registry=None, routes=None, url_scheme=None,
                 host=None, max_depth=None):
        self.registry = registry if registry is not None else RouteRegistry()
        if routes:
            self.registry.add_routes(routes)
        self.url_scheme = url_scheme
        self.host = host
        self.max_depth = max_depth
        self.app = None

        #: Dictionary mapping route names to the controllers of the
        #: resources created for them.
        self.controllers = {}

        # Resources created before an application is bound.
        self._deferred = []

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Binds this manager to the specified :class:`~flask.Flask`
        application and registers the URL rules of every resource
        created so far.

        """
        self.app = app
        deferred, self._deferred = self._deferred, []
        for route, kw in deferred:
            self._register(app, route, **kw)

    def add_routes(self, config):
        """Adds the routes described by `config` to the registry.

        For more information, see
        :meth:`~flask_halrest.routing.RouteRegistry.add_routes`.

        """
        self.registry.add_routes(config)

    def create_resource(self, route, resource=None, fetch=None,
                        fetch_all=None, route_identifier_name='id',
                        entity_identifier_name='id', collection_name=None,
                        entity_route=None, page_size=None):
        """Exposes a resource at the route named `route`.

        Either `resource`, a :class:`~flask_halrest.resource.Resource`,
        or the callbacks `fetch` and `fetch_all` may be specified, but
        not both; otherwise :exc:`IllegalArgumentError` is raised.

        `route_identifier_name`, `entity_identifier_name`, and
        `entity_route` are passed on to the
        :class:`~flask_halrest.controller.ResourceController`.

        `collection_name` defaults to the last segment of the route
        name. `page_size` defaults to the ``HALREST_PAGE_SIZE``
        configuration value of the application, or 25 if that is not
        set.

        Raises :exc:`~flask_halrest.exceptions.UnknownRouteError` if
        there is no route named `route`.

        """
        self.registry.get(route)
        if resource is None:
            resource = Resource(fetch=fetch, fetch_all=fetch_all)
        elif fetch is not None or fetch_all is not None:
            msg = 'specify either a resource or fetch callbacks, not both'
            raise IllegalArgumentError(msg)
        if collection_name is None:
            collection_name = route.rpartition('/')[2]
        kw = dict(resource=resource,
                  route_identifier_name=route_identifier_name,
                  entity_identifier_name=entity_identifier_name,
                  collection_name=collection_name, entity_route=entity_route,
                  page_size=page_size)
        if self.app is None:
            self._deferred.append((route, kw))
        else:
            self._register(self.app, route, **kw)

    def controller_for(self, route):
        """Returns the controller of the resource created for `route`.

        Raises :exc:`KeyError` if no resource has been registered with an
        application for that route.

        """
        return self.controllers[route]

    def url_builder(self):
        """Returns a :class:`~flask_halrest.links.LinkUrlBuilder` for the
        current request.

        This must be called within a Flask request context unless both
        the scheme and the host are configured.

        """
        config = current_app.config
        scheme = self.url_scheme or config.get('HALREST_URL_SCHEME')
        host = self.host or config.get('HALREST_SERVER_NAME')
        if scheme is None:
            scheme = request.scheme
        if host is None:
            host = request.host
        return LinkUrlBuilder(self.registry, scheme, host)

    def renderer(self):
        """Returns a :class:`~flask_halrest.renderer.HalJsonRenderer`
        whose links are built by :meth:`url_builder`.

        """
        extractor = LinkCollectionExtractor(LinkExtractor(self.url_builder()))
        return HalJsonRenderer(extractor, max_depth=self.max_depth)

    def _register(self, app, route, page_size=None, **kw):
        if page_size is None:
            page_size = app.config.get('HALREST_PAGE_SIZE', DEFAULT_PAGE_SIZE)
        controller = ResourceController(registry=self.registry, route=route,
                                        page_size=page_size, **kw)
        view = ResourceView.as_view(route, manager=self,
                                    controller=controller)
        for rule in self.registry.get(route).rules:
            app.add_url_rule(rule, endpoint=route, view_func=view,
                             methods=READONLY_METHODS)
        self.controllers[route] = controller
