# model.py - HAL entity and collection models
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
"""Value containers for the resources rendered as HAL documents.

An :class:`Entity` wraps a single payload, a :class:`Collection` wraps
one page of entities. Both carry a
:class:`~flask_halrest.links.LinkCollection`. They are built once per
request and only read by the renderer.

"""
import math

from .exceptions import PaginationError
from .links import Link
from .links import LinkCollection

#: The default page size for collections.
DEFAULT_PAGE_SIZE = 25


class Entity(object):
    """A single resource.

    `payload` is the domain object to render; its fields appear at the
    top level of the rendered document.

    `identifier` is the identifier of the resource (a string or an
    integer), or ``None``.

    `links` is an iterable of :class:`~flask_halrest.links.Link` objects
    with which to populate :attr:`links`.

    """

    def __init__(self, payload, identifier=None, links=()):
        self.payload = payload
        self.identifier = identifier
        self.links = LinkCollection(links)

    def __repr__(self):
        return '<Entity {0!r}>'.format(self.identifier)


class Collection(object):
    """One page of a homogeneous collection of entities.

    `entities` is an iterable of :class:`Entity` objects, in page order.

    `collection_route` is the name of the route of the collection and
    `collection_route_params` the route parameters inherited from the
    parent scope (for example, the identifier of the parent resource).

    `entity_route` is the name of the route of each entity; it defaults
    to `collection_route`. `entity_route_params` defaults to
    `collection_route_params`. `route_identifier_name` is the name of
    the route parameter of `entity_route` that holds the identifier of
    an entity.

    `collection_name` is the key under which the entities appear in the
    ``_embedded`` element of the rendered document.

    `page` (at least 1) and `page_size` (positive) describe the current
    page; `total_items`, if known, is the number of entities on all
    pages. An invalid page number or page size raises
    :exc:`PaginationError`.

    """

    def __init__(self, entities=(), collection_route=None,
                 collection_route_params=None, entity_route=None,
                 entity_route_params=None, route_identifier_name='id',
                 collection_name='items', page=1,
                 page_size=DEFAULT_PAGE_SIZE, total_items=None, links=()):
        if page < 1:
            raise PaginationError('page must be at least 1, not'
                                  ' {0}'.format(page))
        if page_size < 1:
            raise PaginationError('page size must be positive, not'
                                  ' {0}'.format(page_size))
        if total_items is not None and total_items < 0:
            raise PaginationError('total number of items must not be'
                                  ' negative')
        self.entities = list(entities)
        self.collection_route = collection_route
        self.collection_route_params = dict(collection_route_params or {})
        self.entity_route = entity_route or collection_route
        if entity_route_params is None:
            entity_route_params = self.collection_route_params
        self.entity_route_params = dict(entity_route_params)
        self.route_identifier_name = route_identifier_name
        self.collection_name = collection_name
        self.page = page
        self.page_size = page_size
        self.total_items = total_items
        self.links = LinkCollection(links)

    def __len__(self):
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)

    def __repr__(self):
        return '<Collection {0!r} page {1}>'.format(self.collection_name,
                                                     self.page)

    @property
    def page_count(self):
        """The number of pages, or ``None`` if the total number of items
        is unknown.

        An empty collection has one (empty) page.

        """
        if self.total_items is None:
            return None
        return max(1, int(math.ceil(self.total_items / self.page_size)))

    def self_link(self):
        """Returns the ``self`` link of this collection.

        This is the link stored under the ``'self'`` relation, if any,
        otherwise a new link to :attr:`collection_route` with
        :attr:`collection_route_params`. Returns ``None`` if there is
        neither.

        """
        link = self.links.get('self')
        if link is not None or self.collection_route is None:
            return link
        return Link('self', route=self.collection_route,
                    params=self.collection_route_params)

    def entity_self_link(self, entity):
        """Returns the ``self`` link of `entity` as a member of this
        collection.

        If the entity has its own ``self`` link, that link is returned.
        Otherwise a new link is returned, bound to :attr:`entity_route`
        with :attr:`entity_route_params` and the identifier of the
        entity under :attr:`route_identifier_name`. Returns ``None`` if
        the entity has no self link and no route is known.

        """
        link = entity.links.get('self')
        if link is not None or self.entity_route is None:
            return link
        params = dict(self.entity_route_params)
        params[self.route_identifier_name] = entity.identifier
        return Link('self', route=self.entity_route, params=params)

    def pagination_links(self):
        """Returns the list of pagination links of this collection.

        The links are ``first``, ``last``, ``prev`` (unless this is the
        first page) and ``next`` (unless this is the last page), each
        bound to :attr:`collection_route` with a ``page`` query
        parameter. If the total number of items or the collection route
        is unknown, this returns an empty list.

        """
        page_count = self.page_count
        if page_count is None or self.collection_route is None:
            return []
        numbers = [('first', 1), ('last', page_count)]
        if self.page > 1:
            numbers.append(('prev', min(self.page - 1, page_count)))
        if self.page < page_count:
            numbers.append(('next', self.page + 1))
        return [Link(relation, route=self.collection_route,
                     params=self.collection_route_params,
                     query=dict(page=number))
                for relation, number in numbers]
