# renderer.py - rendering of entities and collections as HAL documents
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
"""Renders :class:`~flask_halrest.model.Entity` and
:class:`~flask_halrest.model.Collection` objects as `HAL`_ documents,
and errors as `API Problem`_ documents.

Rendering is all-or-nothing: if any link of any entity cannot be
resolved, :meth:`HalJsonRenderer.render` raises an exception and no
document is produced.

.. _HAL: https://tools.ietf.org/html/draft-kelly-json-hal
.. _API Problem: https://tools.ietf.org/html/rfc7807

"""
from datetime import date
from datetime import datetime
from datetime import time
from datetime import timedelta
from decimal import Decimal
from json import JSONEncoder
import json
import uuid

from werkzeug.http import HTTP_STATUS_CODES

from .exceptions import CircularReferenceError
from .exceptions import LinkResolutionError
from .exceptions import SerializationException
from .extractors import extract_payload
from .model import Collection
from .model import Entity

#: The media type of HAL documents.
HAL_MIMETYPE = 'application/hal+json'

#: The media type of API Problem documents.
PROBLEM_MIMETYPE = 'application/problem+json'

#: The ``type`` of API Problem documents that describe a plain HTTP
#: status.
PROBLEM_TYPE = 'http://www.w3.org/Protocols/rfc2616/rfc2616-sec10.html'

#: Keys of a HAL document that a payload may not provide.
RESERVED_KEYS = ('_links', '_embedded')


class HALJSONEncoder(JSONEncoder):
    """Extends the default JSON encoder to serialize objects from the
    :mod:`datetime` module, UUIDs and decimals.

    Any other object that cannot be serialized raises
    :exc:`~flask_halrest.exceptions.SerializationException`.

    """

    def default(self, obj):
        if isinstance(obj, (date, datetime, time)):
            return obj.isoformat()
        if isinstance(obj, timedelta):
            return obj.total_seconds()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, Decimal):
            return str(obj)
        try:
            return super(HALJSONEncoder, self).default(obj)
        except TypeError as exception:
            raise SerializationException(obj, str(exception)) from exception


class HalJsonRenderer(object):
    """Renders entities and collections as HAL documents.

    `link_collection_extractor` is the
    :class:`~flask_halrest.extractors.LinkCollectionExtractor` that
    resolves the ``_links`` element of each document.

    `max_depth` is the maximum depth of embedded entities rendered in
    full; deeper entities are rendered with only their ``_links``
    element. If `max_depth` is ``None``, there is no maximum, and a
    payload that embeds itself raises :exc:`CircularReferenceError`.

    """

    def __init__(self, link_collection_extractor, max_depth=None):
        self.link_collection_extractor = link_collection_extractor
        self.max_depth = max_depth

    def render(self, resource):
        """Returns the HAL document for `resource`, an
        :class:`~flask_halrest.model.Entity` or a
        :class:`~flask_halrest.model.Collection`, as a dictionary.

        """
        if isinstance(resource, Collection):
            return self._render_collection(resource, depth=0, parents=())
        if isinstance(resource, Entity):
            return self._render_entity(resource, depth=0, parents=())
        raise TypeError('cannot render object of type'
                        ' {0}'.format(type(resource).__name__))

    def to_json(self, document):
        """Returns `document` serialized as a JSON string.

        The order of keys is preserved, so rendering the same resource
        twice yields the same string.

        Raises :exc:`~flask_halrest.exceptions.SerializationException` if
        the document contains a value that cannot be serialized.

        """
        return json.dumps(document, cls=HALJSONEncoder)

    def render_problem(self, status, title=None, detail=None, kind=None):
        """Returns an API Problem document for an error response.

        `status` is the HTTP status code. If `title` is not given, the
        standard reason phrase of the status code is used. `kind` is the
        name of the kind of error that occurred, if known.

        """
        if title is None:
            title = HTTP_STATUS_CODES.get(status, 'Unknown Error')
        document = {'type': PROBLEM_TYPE, 'title': title, 'status': status}
        if detail is not None:
            document['detail'] = detail
        if kind is not None:
            document['kind'] = kind
        return document

    def _extract_links(self, links, identifier=None):
        try:
            return self.link_collection_extractor.extract(links)
        except LinkResolutionError as exception:
            # Annotate with the innermost entity only.
            if exception.identifier is None:
                exception.identifier = identifier
            raise

    def _render_entity(self, entity, depth, parents, self_link=None):
        links = list(entity.links)
        if self_link is not None and 'self' not in entity.links:
            links.insert(0, self_link)
        if self.max_depth is not None and depth > self.max_depth:
            return {'_links': self._extract_links(links, entity.identifier)}
        marker = id(entity.payload)
        if marker in parents and self.max_depth is None:
            raise CircularReferenceError(entity.payload)
        parents = parents + (marker, )
        document = {}
        embedded = {}
        for key, value in extract_payload(entity.payload).items():
            if key in RESERVED_KEYS:
                continue
            if isinstance(value, Entity):
                embedded[key] = self._render_entity(value, depth + 1, parents)
            elif isinstance(value, Collection):
                embedded[key] = self._render_members(value, depth + 1,
                                                     parents)
            else:
                document[key] = value
        document['_links'] = self._extract_links(links, entity.identifier)
        if embedded:
            document['_embedded'] = embedded
        return document

    def _render_members(self, collection, depth, parents):
        return [self._render_entity(entity, depth, parents,
                                    self_link=collection.entity_self_link(
                                        entity))
                for entity in collection.entities]

    def _render_collection(self, collection, depth, parents):
        links = list(collection.links)
        self_link = collection.self_link()
        if self_link is not None and 'self' not in collection.links:
            links.insert(0, self_link)
        for link in collection.pagination_links():
            if link.relation not in collection.links:
                links.append(link)
        document = {'_links': self._extract_links(links)}
        members = self._render_members(collection, depth, parents)
        document['_embedded'] = {collection.collection_name: members}
        document['page'] = collection.page
        document['page_size'] = collection.page_size
        if collection.total_items is not None:
            document['total_items'] = collection.total_items
            document['page_count'] = collection.page_count
        return document
