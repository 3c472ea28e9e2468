# exceptions.py - exceptions raised by Flask-HALRest
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
"""Exceptions that arise from routing, link resolution, and rendering.

Every exception defined here, except :exc:`ProcessingException`, is a
subclass of :exc:`HALError`, whose :attr:`~HALError.kind` attribute is
the name of the concrete exception class. The views use that name as
the ``kind`` element of an API Problem document.

"""
from werkzeug.exceptions import HTTPException


class HALError(Exception):
    """Base class for errors raised by Flask-HALRest.

    `message` is a string describing the problem.

    """

    def __init__(self, message=None, *args, **kw):
        super(HALError, self).__init__(message, *args, **kw)
        self.message = message

    @property
    def kind(self):
        """The name of the class of this exception, as a string."""
        return self.__class__.__name__

    def __str__(self):
        return self.message or self.kind


# Routing errors.

class RoutingError(HALError):
    """Base class for errors raised by the route registry."""
    pass


class InvalidTemplateError(RoutingError):
    """Raised when a route template cannot be parsed.

    `template` is the offending template string.

    """

    def __init__(self, template, detail, *args, **kw):
        message = 'invalid route template "{0}": {1}'.format(template, detail)
        super(InvalidTemplateError, self).__init__(message, *args, **kw)
        self.template = template


class DuplicateRouteError(RoutingError):
    """Raised when registering a route under a name that already exists."""

    def __init__(self, name, *args, **kw):
        message = 'a route named "{0}" is already registered'.format(name)
        super(DuplicateRouteError, self).__init__(message, *args, **kw)
        self.name = name


class UnknownParentError(RoutingError):
    """Raised when registering a route whose parent route does not
    exist.

    """

    def __init__(self, name, parent, *args, **kw):
        message = ('cannot register route "{0}": parent route "{1}" does'
                   ' not exist').format(name, parent)
        super(UnknownParentError, self).__init__(message, *args, **kw)
        self.name = name
        self.parent = parent


class UnknownRouteError(RoutingError):
    """Raised when building a URL for a route that is not registered."""

    def __init__(self, name, *args, **kw):
        message = 'no route named "{0}" is registered'.format(name)
        super(UnknownRouteError, self).__init__(message, *args, **kw)
        self.name = name


class MissingParameterError(RoutingError):
    """Raised when building a URL without a value for a required route
    parameter.

    `missing` is the list of names of the required parameters for which
    no value was provided, including those declared by ancestor routes.

    """

    def __init__(self, name, missing, *args, **kw):
        message = 'missing parameter(s) {0} for route "{1}"'
        message = message.format(', '.join(missing), name)
        super(MissingParameterError, self).__init__(message, *args, **kw)
        self.name = name
        self.missing = list(missing)


class NoMatchError(RoutingError):
    """Raised when no registered route matches a request."""

    def __init__(self, method, path, *args, **kw):
        message = 'no route matches {0} {1}'.format(method, path)
        super(NoMatchError, self).__init__(message, *args, **kw)
        self.method = method
        self.path = path


# Link errors.

class LinkError(HALError):
    """Base class for errors involving links and link collections."""
    pass


class InvalidLinkError(LinkError):
    """Raised when a link is bound to both a route and a URL, or to
    neither of them.

    """

    def __init__(self, relation, detail, *args, **kw):
        message = 'link "{0}" {1}'.format(relation, detail)
        super(InvalidLinkError, self).__init__(message, *args, **kw)
        self.relation = relation


class DuplicateRelationError(LinkError):
    """Raised when adding a link to a link collection that already has
    a link with the same relation name.

    """

    def __init__(self, relation, *args, **kw):
        message = ('a link with relation "{0}" already exists; use'
                   ' LinkCollection.replace() to overwrite it')
        message = message.format(relation)
        super(DuplicateRelationError, self).__init__(message, *args, **kw)
        self.relation = relation


class LinkResolutionError(LinkError):
    """Raised when the URL of a link cannot be built.

    `relation` is the relation name of the link that failed and `cause`
    is the exception that caused the failure. `identifier` is the
    identifier of the entity owning the link, if known; the renderer
    sets it when the error passes through an entity.

    """

    def __init__(self, relation, cause, identifier=None, *args, **kw):
        super(LinkResolutionError, self).__init__(None, *args, **kw)
        self.relation = relation
        self.cause = cause
        self.identifier = identifier

    def __str__(self):
        message = 'failed to resolve link "{0}"'.format(self.relation)
        # The identifier may be set after construction.
        if self.identifier is not None:
            message += ' of entity "{0}"'.format(self.identifier)
        return '{0}: {1}'.format(message, self.cause)


# Rendering errors.

class RenderError(HALError):
    """Base class for errors raised while rendering a HAL document."""
    pass


class SerializationException(RenderError):
    """Raised when a payload cannot be converted to a dictionary.

    `instance` is the (problematic) payload.

    """

    def __init__(self, instance, message=None, *args, **kw):
        if message is None:
            message = 'cannot extract fields from object of type {0}'
            message = message.format(type(instance).__name__)
        super(SerializationException, self).__init__(message, *args, **kw)
        self.instance = instance


class CircularReferenceError(RenderError):
    """Raised when a payload embeds itself, directly or indirectly, and
    no maximum depth has been configured on the renderer.

    """

    def __init__(self, instance, *args, **kw):
        message = ('circular reference detected while embedding object of'
                   ' type {0}').format(type(instance).__name__)
        super(CircularReferenceError, self).__init__(message, *args, **kw)
        self.instance = instance


class PaginationError(RenderError):
    """Raised when a collection is given an invalid page number or page
    size.

    """
    pass


class ProcessingException(HTTPException):
    """Raised by a resource callback or a controller to request an
    error response with a specific status code.

    The keyword arguments ``status``, ``title``, and ``detail``
    correspond to the elements of the API Problem document returned to
    the client.

    Any additional positional or keyword arguments are supplied directly
    to the superclass, :exc:`werkzeug.exceptions.HTTPException`.

    """

    def __init__(self, status=400, title=None, detail=None, *args, **kw):
        super(ProcessingException, self).__init__(*args, **kw)
        self.status = status
        self.code = status
        self.title = title
        self.detail = detail
