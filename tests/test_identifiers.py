# test_identifiers.py - unit tests for identifier resolution
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
"""Unit tests for the :mod:`flask_halrest.identifiers` module."""
from collections import namedtuple

from pytest import raises

from flask_halrest import RouteMatch
from flask_halrest import RouteRegistry
from flask_halrest import resolve_identifier
from flask_halrest.identifiers import get_identifier

from .helpers import ALTERNATE_ROUTES
from .helpers import person


class TestResolveIdentifier(object):
    """Unit tests for :func:`flask_halrest.resolve_identifier`."""

    def setup_method(self):
        self.registry = RouteRegistry.from_config(ALTERNATE_ROUTES)

    def test_child_collection(self):
        """Tests that a request for a child collection is recognized as
        such even though the parent route declares a parameter named
        ``id`` which has a value.

        """
        match = self.registry.match('GET', '/api/parent/anakin/child')
        assert match.get('id') == 'anakin'
        assert resolve_identifier(match, 'child_id') == (None, True)

    def test_child_entity(self):
        match = self.registry.match('GET', '/api/parent/anakin/child/luke')
        assert resolve_identifier(match, 'child_id') == ('luke', False)

    def test_parent_entity(self):
        match = self.registry.match('GET', '/api/parent/anakin')
        assert resolve_identifier(match, 'id') == ('anakin', False)

    def test_parent_collection(self):
        match = self.registry.match('GET', '/api/parent')
        assert resolve_identifier(match, 'id') == (None, True)

    def test_empty_value(self):
        match = RouteMatch('parent/child', dict(id='anakin', child_id=''))
        assert resolve_identifier(match, 'child_id') == (None, True)

    def test_integer_value(self):
        match = RouteMatch('parent', dict(id=0))
        assert resolve_identifier(match, 'id') == (0, False)

    def test_empty_name(self):
        match = RouteMatch('parent', dict(id='anakin'))
        with raises(ValueError):
            resolve_identifier(match, '')
        with raises(ValueError):
            resolve_identifier(match, None)


class TestGetIdentifier(object):
    """Unit tests for :func:`flask_halrest.identifiers.get_identifier`."""

    def test_mapping(self):
        assert get_identifier(dict(id='luke', name='Luke')) == 'luke'

    def test_attribute(self):
        assert get_identifier(person('leia', 'Leia Organa')) == 'leia'

    def test_named_tuple(self):
        Person = namedtuple('Person', ['key', 'name'])
        assert get_identifier(Person('luke', 'Luke'), 'key') == 'luke'

    def test_missing(self):
        assert get_identifier(dict(name='Luke')) is None
        assert get_identifier(object()) is None
