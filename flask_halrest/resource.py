# resource.py - resources backed by fetch callbacks
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
"""Provides the :class:`Resource` class, the source of the data
rendered by a :class:`~flask_halrest.controller.ResourceController`.

"""
from .exceptions import ProcessingException


class Resource(object):
    """A source of domain objects, defined by callbacks.

    `fetch` is a function with the signature ``fetch(identifier,
    route_match)`` that returns the domain object with the given
    identifier, an :class:`~flask_halrest.model.Entity`, or ``None`` if
    there is no such object.

    `fetch_all` is a function with the signature
    ``fetch_all(route_match)`` that returns a sequence of domain
    objects, or a :class:`~flask_halrest.model.Collection`.

    In both cases `route_match` is the
    :class:`~flask_halrest.routing.RouteMatch` of the current request,
    from which the callbacks can read the identifiers of parent
    resources. The callbacks must return fully materialized results.
    Exceptions they raise are propagated unchanged; they may raise
    :exc:`~flask_halrest.exceptions.ProcessingException` to produce an
    error response with a specific status code.

    """

    def __init__(self, fetch=None, fetch_all=None):
        self._fetch = fetch
        self._fetch_all = fetch_all

    def fetch(self, identifier, route_match):
        """Returns the result of the ``fetch`` callback.

        Raises :exc:`~flask_halrest.exceptions.ProcessingException` with
        status 405 if no such callback was provided.

        """
        if self._fetch is None:
            raise ProcessingException(status=405,
                                      detail='Fetching a single resource is'
                                      ' not supported')
        return self._fetch(identifier, route_match)

    def fetch_all(self, route_match):
        """Returns the result of the ``fetch_all`` callback.

        Raises :exc:`~flask_halrest.exceptions.ProcessingException` with
        status 405 if no such callback was provided.

        """
        if self._fetch_all is None:
            raise ProcessingException(status=405,
                                      detail='Fetching a collection is not'
                                      ' supported')
        return self._fetch_all(route_match)
