# identifiers.py - identifier resolution for requests and payloads
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
"""Functions that determine which resource a request or payload refers
to.

Parent and child routes often declare differently named identifier
parameters (for example ``id`` for the parent and ``child_id`` for the
child), so the name of the identifier parameter must always be given
explicitly. There is no fallback to a parameter named ``id``.

"""
from collections.abc import Mapping


def resolve_identifier(route_match, identifier_name):
    """Returns the pair ``(identifier, is_collection)`` for the request
    that produced `route_match`.

    `route_match` is a :class:`~flask_halrest.routing.RouteMatch`.

    `identifier_name` is the name of the route parameter that holds the
    identifier of a single resource. Only that parameter is consulted.

    If the parameter is absent or empty, the request is a request for a
    collection and this function returns ``(None, True)``. Otherwise it
    returns the value of the parameter (as found, usually a string) and
    ``False``.

    Raises :exc:`ValueError` if `identifier_name` is empty.

    """
    if not identifier_name:
        raise ValueError('the name of the identifier parameter must not be'
                         ' empty')
    identifier = route_match.get(identifier_name)
    if identifier is None or identifier == '':
        return None, True
    return identifier, False


def get_identifier(payload, name='id'):
    """Returns the identifier of a fetched `payload`, or ``None``.

    `payload` may be a mapping, in which case `name` is looked up as a
    key, or any other object, in which case `name` is looked up as an
    attribute.

    """
    if isinstance(payload, Mapping):
        return payload.get(name)
    return getattr(payload, name, None)
