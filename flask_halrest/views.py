# views.py - Flask views that respond with HAL documents
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
"""View classes for responding to requests for resources with HAL
documents.

The main class in this module, :class:`ResourceView`, is a
:class:`~flask.views.MethodView` subclass that dispatches a request to
a :class:`~flask_halrest.controller.ResourceController` and renders the
result. Errors are answered with API Problem documents; a partially
rendered document is never sent.

"""
from flask import current_app
from flask import request
from flask.views import MethodView

from .exceptions import HALError
from .exceptions import NoMatchError
from .exceptions import ProcessingException
from .identifiers import resolve_identifier
from .renderer import HAL_MIMETYPE
from .renderer import PROBLEM_MIMETYPE

#: The query parameter key that identifies the page number in a
#: :http:method:`get` request for a collection.
PAGE_PARAM = 'page'


def hal_response(renderer, document, status=200):
    """Returns a response whose body is the HAL `document` serialized by
    `renderer`.

    Raises :exc:`~flask_halrest.exceptions.SerializationException` if the
    document cannot be serialized.

    """
    return current_app.response_class(renderer.to_json(document),
                                      status=status, mimetype=HAL_MIMETYPE)


def problem_response(renderer, status=400, cause=None, **kw):
    """Returns an API Problem response with the specified status code.

    If `cause` is not ``None``, it is logged on the current Flask
    application. The remaining keyword arguments are passed directly to
    :meth:`~flask_halrest.renderer.HalJsonRenderer.render_problem`.

    """
    if cause is not None:
        current_app.logger.exception(str(cause))
    document = renderer.render_problem(status, **kw)
    return current_app.response_class(renderer.to_json(document),
                                      status=status, mimetype=PROBLEM_MIMETYPE)


def parse_page():
    """Returns the page number requested by the client.

    Raises :exc:`~flask_halrest.exceptions.ProcessingException` if the
    page query parameter is not a positive integer.

    """
    value = request.args.get(PAGE_PARAM, 1)
    try:
        page = int(value)
    except ValueError:
        detail = 'Page number must be a positive integer, not "{0}"'
        raise ProcessingException(status=400, detail=detail.format(value))
    if page < 1:
        detail = 'Page number must be a positive integer, not {0}'
        raise ProcessingException(status=400, detail=detail.format(page))
    return page


class ResourceView(MethodView):
    """Responds to :http:method:`get` requests for a single resource or
    for a collection of resources.

    `manager` is the :class:`~flask_halrest.manager.HALManager` that
    created this view; it provides the route registry and the renderer.

    `controller` is the
    :class:`~flask_halrest.controller.ResourceController` for the route
    at which this view is registered.

    """

    def __init__(self, manager, controller):
        super(ResourceView, self).__init__()
        self.manager = manager
        self.controller = controller

    def get(self, **kw):
        """Returns the HAL document for the requested resource, or for the
        requested page of the collection if the request has no
        identifier.

        The keyword arguments supplied by Flask are ignored; the request
        path is matched against the route registry instead, so that the
        route defaults are part of the route match.

        """
        renderer = self.manager.renderer()
        registry = self.manager.registry
        try:
            route_match = registry.match(request.method, request.path)
        except NoMatchError as exception:
            return problem_response(renderer, 404, cause=exception,
                                    detail=str(exception),
                                    kind=exception.kind)
        identifier, is_collection = resolve_identifier(
            route_match, self.controller.route_identifier_name)
        try:
            if is_collection:
                page = parse_page()
                result = self.controller.get_list(route_match, page=page)
            else:
                result = self.controller.get(identifier, route_match)
            response = hal_response(renderer, renderer.render(result))
        except ProcessingException as exception:
            return problem_response(renderer, exception.status,
                                    cause=exception, title=exception.title,
                                    detail=exception.detail,
                                    kind=exception.__class__.__name__)
        except HALError as exception:
            return problem_response(renderer, 500, cause=exception,
                                    detail=str(exception),
                                    kind=exception.kind)
        return response
