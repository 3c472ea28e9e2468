# links.py - links, link collections, and link URL building
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
"""Links between resources.

A :class:`Link` is a named relation bound either to a route (plus route
parameters) or to a literal URL. Links are grouped by relation name in
a :class:`LinkCollection`, and turned into absolute URLs by a
:class:`LinkUrlBuilder`.

"""
from urllib.parse import urlencode
from urllib.parse import urljoin

from .exceptions import DuplicateRelationError
from .exceptions import InvalidLinkError


class Link(object):
    """A relation to another resource.

    `relation` is the relation name, for example ``'self'``.

    A link is bound to exactly one of `route` (the name of a route in a
    :class:`~flask_halrest.routing.RouteRegistry`, with the route
    parameters `params` and the optional query parameters `query`) or
    `url` (a literal, possibly relative URL). Binding a link to both
    raises :exc:`InvalidLinkError`.

    Any additional keyword arguments are HAL link attributes, such as
    ``templated`` or ``title``; they are stored in :attr:`attributes`
    and copied unmodified into the rendered link object. The ``href``
    attribute is computed when the link is rendered and cannot be
    given here; passing it raises :exc:`InvalidLinkError`.

    """

    def __init__(self, relation, route=None, params=None, url=None,
                 query=None, **attributes):
        if route is not None and url is not None:
            raise InvalidLinkError(relation, 'cannot have both a route and'
                                   ' a URL')
        if 'href' in attributes:
            raise InvalidLinkError(relation, 'cannot set "href" as an'
                                   ' attribute')
        self.relation = relation
        self._route = route
        self._url = url
        #: Dictionary of route parameters.
        self.params = dict(params or {})
        #: Dictionary of query parameters appended to a route URL.
        self.query = dict(query or {})
        #: Dictionary of additional HAL link attributes.
        self.attributes = attributes

    def __repr__(self):
        target = self._url if self._url is not None else self._route
        return '<Link {0!r} -> {1!r}>'.format(self.relation, target)

    @property
    def route(self):
        """The name of the route to which this link is bound, or
        ``None``.

        """
        return self._route

    @route.setter
    def route(self, value):
        if value is not None and self._url is not None:
            raise InvalidLinkError(self.relation, 'already has a URL')
        self._route = value

    @property
    def url(self):
        """The literal URL to which this link is bound, or ``None``."""
        return self._url

    @url.setter
    def url(self, value):
        if value is not None and self._route is not None:
            raise InvalidLinkError(self.relation, 'already has a route')
        self._url = value

    def is_complete(self):
        """Returns ``True`` if and only if this link is bound to either
        a route or a URL.

        """
        return self._route is not None or self._url is not None

    def copy(self):
        """Returns a new link equal to this one, with its own copies of
        the route parameters, query parameters and attributes.

        """
        return Link(self.relation, route=self._route, params=self.params,
                    url=self._url, query=self.query, **self.attributes)


class LinkCollection(object):
    """An ordered set of links, keyed by relation name.

    Iterating over a link collection yields its links in the order in
    which they were added.

    """

    def __init__(self, links=()):
        self._links = {}
        for link in links:
            self.add(link)

    def __contains__(self, relation):
        return relation in self._links

    def __iter__(self):
        return iter(list(self._links.values()))

    def __len__(self):
        return len(self._links)

    def add(self, link):
        """Adds `link` to this collection.

        Raises :exc:`DuplicateRelationError` if a link with the same
        relation name is already present; use :meth:`replace` to
        overwrite it explicitly.

        """
        if link.relation in self._links:
            raise DuplicateRelationError(link.relation)
        self._links[link.relation] = link
        return self

    def replace(self, link):
        """Adds `link` to this collection, overwriting any link with the
        same relation name but keeping its position.

        """
        self._links[link.relation] = link
        return self

    def get(self, relation, default=None):
        """Returns the link with the given relation name, or `default`."""
        return self._links.get(relation, default)

    def has(self, relation):
        """Returns ``True`` if a link with the given relation name is
        present.

        """
        return relation in self._links

    def remove(self, relation):
        """Removes and returns the link with the given relation name, or
        returns ``None`` if there is no such link.

        """
        return self._links.pop(relation, None)


class LinkUrlBuilder(object):
    """Builds absolute URLs for links.

    `registry` is the :class:`~flask_halrest.routing.RouteRegistry` used
    to build the path of route-bound links.

    `scheme` and `host` form the server URL, ``scheme://host``, which
    prefixes every built path and against which relative literal URLs
    are resolved.

    """

    def __init__(self, registry, scheme='http', host='localhost'):
        self.registry = registry
        self.scheme = scheme
        self.host = host

    @property
    def server_url(self):
        """The server URL, ``scheme://host``, without a trailing
        slash.

        """
        return '{0}://{1}'.format(self.scheme, self.host)

    def build(self, link):
        """Returns the absolute URL of `link`.

        Raises :exc:`InvalidLinkError` if the link is bound to neither a
        route nor a URL. Errors from
        :meth:`~flask_halrest.routing.RouteRegistry.build_url` propagate
        unchanged.

        """
        if link.url is not None:
            return urljoin(self.server_url + '/', link.url)
        if link.route is None:
            raise InvalidLinkError(link.relation, 'has neither a route nor'
                                   ' a URL')
        url = self.server_url + self.registry.build_url(link.route,
                                                        link.params)
        if link.query:
            url = '{0}?{1}'.format(url, urlencode(link.query))
        return url
