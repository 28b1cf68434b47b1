"""
View Builder
Resolves a view identifier to a template URI, an engine and a view object
"""
import threading
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from viewkit.defaults import (
    CLASS_NAME_KEY,
    DEFAULT_VIEW_CONFIG,
    ENGINE_FINDER_KEY,
    VIEW_FINDER_KEY,
    VIEWS_KEY,
)
from viewkit.engine.engine import Engine
from viewkit.exceptions import FailedToInstantiateView, FailedToProcessConfig
from viewkit.location.location import Location
from viewkit.location.locations import Locations
from viewkit.logging import getLogger
from viewkit.support.class_loader import ClassLoader
from viewkit.support.config import Config
from viewkit.view.view import View

logger = getLogger(__name__)


class ViewBuilder:
    """
    Builds views for view identifiers

    Usage:
        builder = ViewBuilder()
        builder.add_location(FilesystemLocation('resources/views', ['.html']))

        view = builder.create('pages/home')
        html = view.render({'title': 'Home'})

        # Force a view type: configured alias, class name or factory
        view = builder.create('pages/home', 'json')

    The ViewFinder and EngineFinder are built from the 'ViewFinder' and
    'EngineFinder' sections of the config on first use, then reused for
    the lifetime of the builder.
    """

    ENGINE_FINDER_KEY = ENGINE_FINDER_KEY
    VIEW_FINDER_KEY = VIEW_FINDER_KEY

    def __init__(
        self,
        config: Optional[Any] = None,
        view_finder=None,
        engine_finder=None,
        locations: Optional[Locations] = None
    ):
        """
        Initialize the builder

        Args:
            config: Config instance or mapping (defaults to DEFAULT_VIEW_CONFIG)
            view_finder: ViewFinder instance to use instead of the configured one
            engine_finder: EngineFinder instance to use instead of the configured one
            locations: Locations collection to scan

        Raises:
            FailedToProcessConfig: If the config could not be processed
        """
        self.config = self._process_config(config)
        self.view_finder = view_finder
        self.engine_finder = engine_finder
        self.locations = locations if locations is not None else Locations()
        self._lock = threading.RLock()

    @staticmethod
    def _process_config(config) -> Config:
        if config is None:
            return Config(DEFAULT_VIEW_CONFIG)
        if isinstance(config, Config):
            return config
        if isinstance(config, Mapping):
            return Config(config)
        raise FailedToProcessConfig(
            f"Could not process config of type {type(config).__name__}."
        )

    def create(self, view_id: str, type: Any = None) -> View:
        """
        Create a new view for a given view identifier

        Args:
            view_id: View identifier to create a view for
            type: Type of view to create (configured alias, class name or factory)

        Returns:
            The requested view, or the ViewFinder's null object when no
            location holds a matching template

        Raises:
            FailedToInstantiateView: If the requested type could not be resolved
        """
        uri = self.scan_locations([view_id])
        engine = self.get_engine(uri)
        view = self.get_view(uri, engine, type)

        logger.debug(
            "View created",
            extra={'view_id': view_id, 'uri': uri, 'engine': engine.__class__.__name__}
        )

        if hasattr(view, 'set_builder'):
            view.set_builder(self)
        return view

    def get_engine(self, uri: Optional[str]) -> Engine:
        """
        Get an engine that can deal with the given URI

        A missing URI is passed along too: the EngineFinder decides what to
        return for it.
        """
        return self.get_engine_finder().find([uri])

    def get_view(self, uri: Optional[str], engine: Engine, type: Any = None) -> View:
        """
        Get a view for a given URI, engine and type

        Raises:
            FailedToInstantiateView: If the requested type could not be resolved
        """
        if uri is None:
            logger.warning("No location matched, using null view")
            return self.get_view_finder().get_null_object()

        if type is None:
            return self.get_view_finder().find([uri], engine)

        return self.resolve_type(type, uri, engine)

    def get_view_finder(self):
        """Get the ViewFinder instance"""
        return self.get_finder('view_finder', self.VIEW_FINDER_KEY)

    def get_engine_finder(self):
        """Get the EngineFinder instance"""
        return self.get_finder('engine_finder', self.ENGINE_FINDER_KEY)

    def add_location(self, location: Location) -> bool:
        """
        Add a location to scan for views

        Returns:
            bool: Whether the location was added (False if already present)

        Raises:
            InvalidLocation: If the value is not a Location
        """
        with self._lock:
            return self.locations.add(location)

    def scan_locations(self, criteria: Sequence[str]) -> Optional[str]:
        """
        Scan locations for a URI that matches the criteria

        Locations are scanned in the order they were added; the first match
        wins.

        Returns:
            URI of the requested view, or None if no location matches
        """
        for location in self.locations:
            uri = location.get_uri(criteria)
            if uri:
                return uri

        return None

    def get_finder(self, slot: str, key: str):
        """
        Get a finder instance, building it from config on first use

        Args:
            slot: Attribute holding the cached finder
            key: Config section of the finder

        Raises:
            FailedToProcessConfig: If the finder section is missing or malformed
        """
        with self._lock:
            finder = getattr(self, slot)
            if finder is None:
                class_name = self.config.get_key(key, CLASS_NAME_KEY)
                finder_class = self._load_finder_class(class_name, key)
                finder = finder_class(self.config.get_sub_config(key))
                setattr(self, slot, finder)
                logger.debug("Finder initialized", extra={'finder': finder.__class__.__name__})
        return finder

    @staticmethod
    def _load_finder_class(class_name, key: str):
        if callable(class_name):
            return class_name
        try:
            return ClassLoader.resolve(class_name)
        except (ImportError, AttributeError, TypeError, ValueError) as e:
            raise FailedToProcessConfig(
                f"Could not load {key} class '{class_name}': {e}"
            ) from e

    def resolve_type(self, type: Any, uri: str, engine: Optional[Engine] = None) -> View:
        """
        Resolve the view type

        In order:
            1. a string configured exactly under ViewFinder.Views is an alias for a class
            2. any other string is a class name (registered name or dotted path)
            3. a class or factory is called with (uri, engine)

        Raises:
            FailedToInstantiateView: If the type could not be resolved to a View
        """
        view_type = type
        # Aliases match exactly, unlike the case-insensitive section lookup
        aliases = self.config.get_key(self.VIEW_FINDER_KEY, VIEWS_KEY, default={})
        if not isinstance(aliases, Mapping):
            aliases = {}

        if isinstance(type, str) and type in aliases:
            type = self._instantiate(aliases[type], uri, engine, view_type)
        elif isinstance(type, str):
            type = self._instantiate(type, uri, engine, view_type)
        elif callable(type):
            # Only the caller's own value is invoked, never an instance built above
            type = self._instantiate(type, uri, engine, view_type)

        if not isinstance(type, View):
            raise FailedToInstantiateView(
                f'Could not instantiate view "{view_type!r}".',
                view_type=view_type
            )

        return type

    @staticmethod
    def _instantiate(class_name: Any, uri: str, engine: Optional[Engine], view_type: Any) -> Any:
        if isinstance(class_name, Mapping):
            class_name = class_name.get(CLASS_NAME_KEY)

        if isinstance(class_name, str):
            try:
                class_name = ClassLoader.resolve(class_name)
            except (ImportError, AttributeError, ValueError) as e:
                raise FailedToInstantiateView(
                    f'Could not instantiate view "{view_type!r}": {e}',
                    view_type=view_type
                ) from e

        if not callable(class_name):
            raise FailedToInstantiateView(
                f'Could not instantiate view "{view_type!r}".',
                view_type=view_type
            )

        try:
            return class_name(uri, engine)
        except TypeError as e:
            # Resolved class does not accept (uri, engine)
            raise FailedToInstantiateView(
                f'Could not instantiate view "{view_type!r}": {e}',
                view_type=view_type
            ) from e

    def __repr__(self):
        return f'<ViewBuilder ({len(self.locations)} locations)>'
