# extractors.py - conversion of links and payloads to dictionaries
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
"""Extractors turn links and payloads into plain dictionaries ready to
be placed in a HAL document.

"""
from collections.abc import Mapping
import dataclasses

from .exceptions import HALError
from .exceptions import LinkResolutionError
from .exceptions import SerializationException


def extract_payload(payload):
    """Returns a new dictionary containing the fields of `payload`.

    `payload` may be a mapping, a named tuple, an instance of a
    dataclass, or any object with a ``__dict__``, in which case the
    attributes whose names do not begin with an underscore are
    extracted. Nested values are left untouched.

    Raises :exc:`SerializationException` for any other object.

    """
    if isinstance(payload, Mapping):
        return dict(payload)
    if isinstance(payload, tuple) and hasattr(payload, '_asdict'):
        return dict(payload._asdict())
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return dict((field.name, getattr(payload, field.name))
                    for field in dataclasses.fields(payload))
    try:
        attributes = vars(payload)
    except TypeError:
        raise SerializationException(payload)
    return dict((key, value) for key, value in attributes.items()
                if not key.startswith('_'))


class LinkExtractor(object):
    """Turns a single :class:`~flask_halrest.links.Link` into a HAL link
    object.

    `url_builder` is the :class:`~flask_halrest.links.LinkUrlBuilder`
    that computes the ``href`` of each link.

    """

    def __init__(self, url_builder):
        self.url_builder = url_builder

    def extract(self, link):
        """Returns the HAL link object for `link`: a dictionary with the
        ``href`` element followed by the additional attributes of the
        link.

        Errors raised while building the URL propagate unchanged.

        """
        result = {'href': self.url_builder.build(link)}
        for key, value in link.attributes.items():
            result.setdefault(key, value)
        return result


class LinkCollectionExtractor(object):
    """Turns a :class:`~flask_halrest.links.LinkCollection` into the
    ``_links`` element of a HAL document.

    `link_extractor` is the :class:`LinkExtractor` applied to each
    link.

    """

    def __init__(self, link_extractor):
        self.link_extractor = link_extractor

    def extract(self, links):
        """Returns a dictionary mapping each relation name in `links` to
        its HAL link object, in the order in which the links were added.

        `links` may be a :class:`~flask_halrest.links.LinkCollection` or
        any iterable of links.

        If a link cannot be built, this raises
        :exc:`LinkResolutionError` with the relation name of that link
        and the original exception as its cause.

        """
        result = {}
        for link in links:
            try:
                result[link.relation] = self.link_extractor.extract(link)
            except HALError as exception:
                raise LinkResolutionError(link.relation, exception) \
                    from exception
        return result
