# routing.py - hierarchical registry of named routes
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
"""A registry of named, hierarchical routes.

Routes are declared with segment templates such as
``'/api/parent[/:parent]'``, in which ``:name`` declares a parameter and
square brackets enclose an optional part of the URL. A route may have a
parent route; its full template is the parent's full template followed
by its own, so the parameters declared by an ancestor can be used when
building the URL of any of its descendants::

    >>> registry = RouteRegistry()
    >>> parent = registry.register('parent', '/api/parent[/:parent]')
    >>> child = registry.register('parent/child', '/child[/:child]')
    >>> registry.build_url('parent/child', dict(parent='anakin'))
    '/api/parent/anakin/child'

Matching and reverse routing are delegated to a
:class:`werkzeug.routing.Map`: each optional part of a template is
expanded into separate Werkzeug rules sharing the route name as their
endpoint.

"""
import re
from urllib.parse import quote
from urllib.parse import unquote

from werkzeug.exceptions import HTTPException
from werkzeug.routing import BaseConverter
from werkzeug.routing import Map
from werkzeug.routing import Rule

from .exceptions import DuplicateRouteError
from .exceptions import InvalidTemplateError
from .exceptions import MissingParameterError
from .exceptions import NoMatchError
from .exceptions import UnknownParentError
from .exceptions import UnknownRouteError

#: Regular expression for the tokens of a route template.
#:
#: A colon not followed by a valid parameter name is a literal colon.
TOKEN_RE = re.compile(r'''
    (?P<open>\[)
  | (?P<close>\])
  | :(?P<param>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<literal>[^\[\]:]+|:)
''', re.VERBOSE)

#: Server name to which the internal Werkzeug map is bound.
#:
#: Only paths are matched and built, so its value is never used.
_SERVER_NAME = 'localhost'

LITERAL = 'literal'
PARAM = 'param'
OPTIONAL = 'optional'


class SegmentConverter(BaseConverter):
    """Converts a parameter to and from a single path segment.

    Unlike the default Werkzeug converter, a slash inside a value is
    percent-encoded when building a URL, so the value stays one
    segment, and it is decoded again when matching.

    """

    def to_python(self, value):
        return unquote(value)

    def to_url(self, value):
        return quote(str(value), safe="!$&'()*+,:;=@")


def parse_template(template):
    """Parses a route template into a list of parts.

    Each part is a pair ``(kind, value)``. If ``kind`` is
    :data:`LITERAL`, ``value`` is a string; if it is :data:`PARAM`,
    ``value`` is the name of a parameter; if it is :data:`OPTIONAL`,
    ``value`` is itself a list of parts.

    Raises :exc:`InvalidTemplateError` if the brackets are unbalanced.

    """
    root = []
    stack = [root]
    for match in TOKEN_RE.finditer(template):
        if match.group('open'):
            group = []
            stack[-1].append((OPTIONAL, group))
            stack.append(group)
        elif match.group('close'):
            if len(stack) == 1:
                raise InvalidTemplateError(template, 'unbalanced "]"')
            stack.pop()
        elif match.group('param'):
            stack[-1].append((PARAM, match.group('param')))
        else:
            literal = match.group('literal')
            if '<' in literal or '>' in literal:
                detail = 'literal "{0}" must not contain "<" or ">"'
                raise InvalidTemplateError(template, detail.format(literal))
            stack[-1].append((LITERAL, literal))
    if len(stack) > 1:
        raise InvalidTemplateError(template, 'unbalanced "["')
    return root


def declared_params(parts):
    """Returns the list of names of all parameters declared in `parts`,
    including those inside optional groups, in order of appearance.

    """
    result = []
    for kind, value in parts:
        if kind == PARAM:
            result.append(value)
        elif kind == OPTIONAL:
            result.extend(declared_params(value))
    return result


def expand_template(parts):
    """Returns a list of Werkzeug rule strings, one for each combination
    of included and omitted optional groups in `parts`.

    Each element of the list is a pair whose left element is the rule
    string and whose right element is the tuple of names of the
    parameters it contains.

    """
    expansions = [('', ())]
    for kind, value in parts:
        if kind == LITERAL:
            expansions = [(rule + value, names) for rule, names in expansions]
        elif kind == PARAM:
            converted = '<{0}>'.format(value)
            expansions = [(rule + converted, names + (value, ))
                          for rule, names in expansions]
        else:
            choices = [('', ())] + expand_template(value)
            expansions = [(rule + more, names + more_names)
                          for rule, names in expansions
                          for more, more_names in choices]
    return expansions


class Route(object):
    """A named route with a segment template and an optional parent.

    `name` is the full, hierarchical name of the route, for example
    ``'parent/child'``.

    `template` is the template of this route only, without the template
    of its ancestors.

    `parent` is the parent :class:`Route`, or ``None``.

    `defaults` is a dictionary of values merged into the parameters of
    each request matching this route.

    If `may_terminate` is ``False``, requests never match this route,
    but URLs can still be built for it.

    """

    def __init__(self, name, template, parent=None, defaults=None,
                 may_terminate=True):
        self.name = name
        self.template = template
        self.parent = parent
        self.defaults = dict(defaults or {})
        self.may_terminate = may_terminate
        own_parts = parse_template(template)
        inherited = parent.parts if parent is not None else []
        #: The parts of the full template, ancestors first.
        self.parts = inherited + own_parts
        seen = set()
        for param in declared_params(self.parts):
            if param in seen:
                detail = 'parameter "{0}" is declared twice'.format(param)
                raise InvalidTemplateError(self.full_template, detail)
            seen.add(param)
        if not self.full_template.startswith('/'):
            raise InvalidTemplateError(self.full_template,
                                       'must start with "/"')

    def __repr__(self):
        return '<Route {0!r} {1!r}>'.format(self.name, self.full_template)

    @property
    def full_template(self):
        """The template of this route prefixed by the templates of all
        of its ancestors.

        """
        if self.parent is None:
            return self.template
        return self.parent.full_template + self.template

    @property
    def params(self):
        """Tuple of names of all parameters declared by this route and
        its ancestors.

        """
        return tuple(declared_params(self.parts))

    @property
    def required_params(self):
        """Tuple of names of the parameters declared outside of any
        optional group by this route or its ancestors.

        """
        return tuple(value for kind, value in self.parts if kind == PARAM)

    @property
    def rules(self):
        """List of Werkzeug rule strings matching this route, without
        duplicates.

        Rules with more parameters come first, so that building a URL
        includes every optional group for which parameters are given.

        """
        expansions = sorted(expand_template(self.parts),
                            key=lambda expansion: -len(expansion[1]))
        result = []
        for rule, names in expansions:
            if rule not in result:
                result.append(rule)
        return result


class RouteMatch(object):
    """The result of matching a request against a :class:`RouteRegistry`.

    `route_name` is the name of the matched route and `params` is a
    dictionary mapping parameter names to the matched values.

    """

    def __init__(self, route_name, params=None):
        self.route_name = route_name
        self.params = dict(params or {})

    def __repr__(self):
        return '<RouteMatch {0!r} {1!r}>'.format(self.route_name, self.params)

    def __eq__(self, other):
        if not isinstance(other, RouteMatch):
            return NotImplemented
        return (self.route_name, self.params) == (other.route_name,
                                                  other.params)

    def get(self, name, default=None):
        """Returns the value of the parameter `name`, or `default` if the
        request did not provide it.

        """
        return self.params.get(name, default)


class RouteRegistry(object):
    """A table of named routes that matches request paths and builds
    URLs.

    A registry is populated once, at application start-up, and only
    read afterwards. To change the routes of a running application,
    build a new registry (for example with :meth:`from_config`) and
    replace the old one as a whole.

    """

    def __init__(self):
        self._routes = {}
        converters = {'default': SegmentConverter}
        self._map = Map(strict_slashes=False, merge_slashes=False,
                        converters=converters)

    def __contains__(self, name):
        return name in self._routes

    def __iter__(self):
        return iter(self._routes.values())

    def __len__(self):
        return len(self._routes)

    @classmethod
    def from_config(cls, config):
        """Returns a new registry populated from the nested dictionary
        `config`, as described in :meth:`add_routes`.

        """
        registry = cls()
        registry.add_routes(config)
        return registry

    def register(self, name, template, parent=None, defaults=None,
                 may_terminate=True):
        """Registers a new route and returns it.

        `name` is the full name of the route. If `parent` is ``None``
        and `name` contains a slash, the parent is the route named by
        everything before the last slash; for example, the parent of
        ``'parent/child'`` is ``'parent'``.

        Raises :exc:`DuplicateRouteError` if a route named `name`
        already exists and :exc:`UnknownParentError` if the parent route
        has not been registered.

        """
        if name in self._routes:
            raise DuplicateRouteError(name)
        if parent is None and '/' in name:
            parent = name.rpartition('/')[0]
        parent_route = None
        if parent is not None:
            if parent not in self._routes:
                raise UnknownParentError(name, parent)
            parent_route = self._routes[parent]
        route = Route(name, template, parent=parent_route, defaults=defaults,
                      may_terminate=may_terminate)
        for rule in route.rules:
            self._map.add(Rule(rule, endpoint=name,
                               build_only=not may_terminate))
        self._routes[name] = route
        return route

    def add_routes(self, config, parent=None):
        """Registers each route described in the dictionary `config`.

        `config` maps route names to dictionaries with the keys
        ``'route'`` (the template, required), ``'defaults'``,
        ``'may_terminate'`` and ``'child_routes'``, the last of which is
        a dictionary of the same form. Child route names are prefixed by
        the name of their parent, so the following registers the routes
        ``'parent'`` and ``'parent/child'``::

            registry.add_routes({
                'parent': {
                    'route': '/api/parent[/:parent]',
                    'child_routes': {
                        'child': {'route': '/child[/:child]'},
                    },
                },
            })

        """
        for name, options in config.items():
            if parent is not None:
                name = '{0}/{1}'.format(parent, name)
            self.register(name, options['route'], parent=parent,
                          defaults=options.get('defaults'),
                          may_terminate=options.get('may_terminate', True))
            children = options.get('child_routes')
            if children:
                self.add_routes(children, parent=name)

    def get(self, name):
        """Returns the route named `name`.

        Raises :exc:`UnknownRouteError` if there is no such route.

        """
        try:
            return self._routes[name]
        except KeyError:
            raise UnknownRouteError(name)

    def match(self, method, path):
        """Matches a request for `path` with the HTTP method `method`.

        Returns a :class:`RouteMatch` whose parameters are the defaults
        of the matched route updated with the values parsed from the
        path.

        Raises :exc:`NoMatchError` if no route matches.

        """
        adapter = self._map.bind(_SERVER_NAME)
        try:
            endpoint, values = adapter.match(path, method=method)
        except HTTPException as exception:
            raise NoMatchError(method, path) from exception
        params = dict(self._routes[endpoint].defaults)
        params.update(values)
        return RouteMatch(endpoint, params)

    def build_url(self, name, params=None):
        """Returns the path of the route `name` with the given
        parameters substituted.

        Parameters whose value is ``None`` or the empty string are
        treated as absent, and optional groups whose parameters are
        absent are omitted. Parameters not declared by the route or its
        ancestors are ignored.

        Raises :exc:`UnknownRouteError` if there is no such route and
        :exc:`MissingParameterError` if a required parameter of the
        route or of one of its ancestors is absent.

        """
        route = self.get(name)
        values = dict((key, value) for key, value in (params or {}).items()
                      if value is not None and value != ''
                      and key in route.params)
        missing = [param for param in route.required_params
                   if param not in values]
        if missing:
            raise MissingParameterError(name, missing)
        adapter = self._map.bind(_SERVER_NAME)
        return adapter.build(name, values, append_unknown=False)
