"""
viewkit
Locate view templates across prioritized locations and render them through the matching engine
"""

from viewkit.view_builder import ViewBuilder
from viewkit.views import Views
from viewkit.location import Location, FilesystemLocation, Locations
from viewkit.support import Config, URIHelper
from viewkit.view import View, ViewContext, AbstractView, BaseView, NullView
from viewkit.engine import Engine, AbstractEngine, JinjaEngine, PythonFormatEngine, NullEngine
from viewkit.finder import EngineFinder, ViewFinder
from viewkit.exceptions import (
    ViewException,
    InvalidLocation,
    FailedToInstantiateView,
    FailedToInstantiateFinder,
    FailedToProcessConfig,
    FailedToLoadView,
)

__version__ = '0.1.0'

__all__ = [
    'ViewBuilder',
    'Views',
    'Location',
    'FilesystemLocation',
    'Locations',
    'Config',
    'URIHelper',
    'View',
    'ViewContext',
    'AbstractView',
    'BaseView',
    'NullView',
    'Engine',
    'AbstractEngine',
    'JinjaEngine',
    'PythonFormatEngine',
    'NullEngine',
    'EngineFinder',
    'ViewFinder',
    'ViewException',
    'InvalidLocation',
    'FailedToInstantiateView',
    'FailedToInstantiateFinder',
    'FailedToProcessConfig',
    'FailedToLoadView',
]
