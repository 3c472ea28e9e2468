# controller.py - turns fetched domain objects into HAL models
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
"""Provides the :class:`ResourceController` class, which joins a
:class:`~flask_halrest.resource.Resource` to a route and produces
:class:`~flask_halrest.model.Entity` and
:class:`~flask_halrest.model.Collection` objects whose links are
consistent with that route.

"""
from .exceptions import ProcessingException
from .identifiers import get_identifier
from .links import Link
from .model import Collection
from .model import DEFAULT_PAGE_SIZE
from .model import Entity


class ResourceController(object):
    """Fetches resources and wraps them in HAL models.

    `resource` is the :class:`~flask_halrest.resource.Resource` that
    provides the domain objects.

    `route` is the name of the route at which the resource is exposed,
    and `registry` the :class:`~flask_halrest.routing.RouteRegistry`
    containing that route.

    `route_identifier_name` is the name of the route parameter that
    holds the identifier of a single resource; `entity_identifier_name`
    is the name of the field of a domain object that holds its
    identifier. The two differ when, for example, a child route names
    its parameter ``child_id`` while the domain objects have an ``id``.

    `collection_name` is the key under which a collection of resources
    is embedded. `entity_route`, which defaults to `route`, is the route
    of the self links of single resources. `page_size` is the number of
    resources per page of a collection.

    """

    def __init__(self, resource, route, registry, route_identifier_name='id',
                 entity_identifier_name='id', collection_name='items',
                 entity_route=None, page_size=DEFAULT_PAGE_SIZE):
        self.resource = resource
        self.route = route
        self.registry = registry
        self.route_identifier_name = route_identifier_name
        self.entity_identifier_name = entity_identifier_name
        self.collection_name = collection_name
        self.entity_route = entity_route or route
        self.page_size = page_size

    def parent_params(self, route_match):
        """Returns the parameters of `route_match` inherited from the
        parent scope of this controller's route.

        These are the matched values of the parameters declared by the
        route and its ancestors, except the identifier parameter.

        """
        declared = self.registry.get(self.route).params
        return dict((name, value) for name, value in route_match.params.items()
                    if name in declared and name != self.route_identifier_name
                    and value is not None)

    def get(self, identifier, route_match):
        """Fetches the resource with the given identifier and returns it
        as an :class:`~flask_halrest.model.Entity`.

        The ``self`` link of the entity is bound to the entity route,
        with the parent parameters of `route_match` and `identifier`
        under the route identifier name. If the fetched entity already
        has a route-bound ``self`` link, missing parameters are added to
        a copy of it; the fetched entity itself is left unmodified.

        Raises :exc:`~flask_halrest.exceptions.ProcessingException` with
        status 404 if the resource does not exist.

        """
        result = self.resource.fetch(identifier, route_match)
        if result is None:
            detail = 'No resource with ID {0} at route {1}'
            raise ProcessingException(status=404,
                                      detail=detail.format(identifier,
                                                           self.route))
        return self._bind(result, identifier, self.parent_params(route_match))

    def get_list(self, route_match, page=1):
        """Fetches the resources of the collection and returns the
        requested page of it as a
        :class:`~flask_halrest.model.Collection`.

        If the ``fetch_all`` callback returns a
        :class:`~flask_halrest.model.Collection`, it is returned
        unchanged. Otherwise, each domain object on the page is wrapped
        in an entity whose identifier is read from its
        :attr:`entity_identifier_name` field, and the collection gets a
        ``self`` link bound to the route of this controller with the
        parent parameters of `route_match`.

        Raises :exc:`~flask_halrest.exceptions.ProcessingException` with
        status 409 if `page` is beyond the last page.

        """
        result = self.resource.fetch_all(route_match)
        if isinstance(result, Collection):
            return result
        items = list(result)
        total = len(items)
        start = (page - 1) * self.page_size
        if page > 1 and start >= total:
            raise ProcessingException(status=409,
                                      detail='Invalid page provided')
        parent = self.parent_params(route_match)
        entities = []
        for item in items[start:start + self.page_size]:
            payload = item.payload if isinstance(item, Entity) else item
            identifier = get_identifier(payload, self.entity_identifier_name)
            entities.append(self._bind(item, identifier, parent))
        collection = Collection(entities, collection_route=self.route,
                                collection_route_params=parent,
                                entity_route=self.entity_route,
                                route_identifier_name=(
                                    self.route_identifier_name),
                                collection_name=self.collection_name,
                                page=page, page_size=self.page_size,
                                total_items=total)
        collection.links.add(Link('self', route=self.route, params=parent))
        return collection

    def _bind(self, item, identifier, parent):
        """Returns a new entity for `item` whose ``self`` link is bound
        to the entity route within the parent scope `parent`.

        `item` is a domain object or an
        :class:`~flask_halrest.model.Entity`. An entity is copied along
        with its links and is never modified, so callbacks may return
        the same entities on every request.

        """
        if isinstance(item, Entity):
            if item.identifier is not None:
                identifier = item.identifier
            entity = Entity(item.payload, identifier,
                            links=[link.copy() for link in item.links])
        else:
            entity = Entity(item, identifier)
        link = entity.links.get('self')
        if link is None:
            params = dict(parent)
            params[self.route_identifier_name] = identifier
            entity.links.add(Link('self', route=self.entity_route,
                                  params=params))
        elif link.route is not None:
            for name, value in parent.items():
                link.params.setdefault(name, value)
            link.params.setdefault(self.route_identifier_name, identifier)
        return entity
