# __init__.py - indicates that this directory is a Python package
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
"""Provides classes for exposing resources at hierarchical named routes
of a Flask application and rendering them as HAL documents.

"""
# The following names are available as part of the public API for
# Flask-HALRest. End users of this package can import these names by doing
# ``from flask_halrest import HALManager``, for example.
from .controller import ResourceController
from .exceptions import CircularReferenceError
from .exceptions import DuplicateRelationError
from .exceptions import DuplicateRouteError
from .exceptions import HALError
from .exceptions import InvalidLinkError
from .exceptions import InvalidTemplateError
from .exceptions import LinkResolutionError
from .exceptions import MissingParameterError
from .exceptions import NoMatchError
from .exceptions import PaginationError
from .exceptions import ProcessingException
from .exceptions import SerializationException
from .exceptions import UnknownParentError
from .exceptions import UnknownRouteError
from .extractors import LinkCollectionExtractor
from .extractors import LinkExtractor
from .identifiers import resolve_identifier
from .links import Link
from .links import LinkCollection
from .links import LinkUrlBuilder
from .manager import HALManager
from .manager import IllegalArgumentError
from .model import Collection
from .model import Entity
from .renderer import HAL_MIMETYPE
from .renderer import HalJsonRenderer
from .resource import Resource
from .routing import RouteMatch
from .routing import RouteRegistry

#: The current version of this extension.
#:
#: This should be the same as the version specified in the :file:`setup.py`
#: file.
__version__ = '0.1.0-dev'

__all__ = [
    'CircularReferenceError',
    'Collection',
    'DuplicateRelationError',
    'DuplicateRouteError',
    'Entity',
    'HAL_MIMETYPE',
    'HALError',
    'HALManager',
    'HalJsonRenderer',
    'IllegalArgumentError',
    'InvalidLinkError',
    'InvalidTemplateError',
    'Link',
    'LinkCollection',
    'LinkCollectionExtractor',
    'LinkExtractor',
    'LinkResolutionError',
    'LinkUrlBuilder',
    'MissingParameterError',
    'NoMatchError',
    'PaginationError',
    'ProcessingException',
    'Resource',
    'ResourceController',
    'resolve_identifier',
    'RouteMatch',
    'RouteRegistry',
    'SerializationException',
    'UnknownParentError',
    'UnknownRouteError',
]
