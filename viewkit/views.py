"""
Views Facade
Static-like access to a shared ViewBuilder
"""
import threading
from typing import Any, Mapping, Optional

from viewkit.defaults import DEFAULT_VIEW_CONFIG
from viewkit.location.location import Location
from viewkit.support.config import Config
from viewkit.view.view import View
from viewkit.view_builder import ViewBuilder


class Views:
    """
    Views Facade

    Provides static access to a process-wide view builder.

    Example:
        Views.add_location(FilesystemLocation('resources/views', ['.html']))

        html = Views.render('pages/home', {'title': 'Home'})
        view = Views.create('pages/home')

        # Use custom config for the shared builder
        Views.set_config({'ViewFinder': {'Views': {'json': 'myapp.views.JsonView'}}})
    """

    _lock = threading.Lock()
    _builder: Optional[ViewBuilder] = None
    _config: Optional[Config] = None

    @classmethod
    def get_view_builder(cls) -> ViewBuilder:
        """
        Get the shared builder, creating it on first access

        Raises:
            FailedToProcessConfig: If the config could not be processed
        """
        with cls._lock:
            if cls._builder is None:
                config = cls._config or Config(DEFAULT_VIEW_CONFIG)
                cls._builder = ViewBuilder(config)
        return cls._builder

    @classmethod
    def set_view_builder(cls, builder: ViewBuilder) -> None:
        """Replace the shared builder"""
        with cls._lock:
            cls._builder = builder

    @classmethod
    def set_config(cls, config: Mapping) -> None:
        """
        Merge config onto the defaults for the shared builder

        Drops the current builder, so locations must be added again.
        """
        with cls._lock:
            cls._config = Config.merged(DEFAULT_VIEW_CONFIG, config)
            cls._builder = None

    @classmethod
    def add_location(cls, location: Location) -> bool:
        """Add a location to the shared builder"""
        return cls.get_view_builder().add_location(location)

    @classmethod
    def create(cls, view_id: str, type: Any = None) -> View:
        """Create a view through the shared builder"""
        return cls.get_view_builder().create(view_id, type)

    @classmethod
    def render(cls, view_id: str, context: Optional[Mapping[str, Any]] = None, type: Any = None) -> str:
        """Create and render a view through the shared builder"""
        return cls.create(view_id, type).render(context)

    @classmethod
    def reset(cls) -> None:
        """Forget the shared builder and config"""
        with cls._lock:
            cls._builder = None
            cls._config = None
