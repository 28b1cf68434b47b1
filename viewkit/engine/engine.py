"""
Engine Interface
Abstract base classes for all rendering engines
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple

from viewkit.defaults import EXTENSIONS_KEY
from viewkit.exceptions import FailedToLoadView
from viewkit.support.config import Config
from viewkit.support.uri_helper import URIHelper

RenderCallback = Callable[[Any], str]


class Engine(ABC):
    """
    Interface that all rendering engines must implement

    An engine decides whether it can render a URI and produces a render
    callback for it. The callback is invoked with the view being rendered
    and returns the rendered output.
    """

    @abstractmethod
    def can_render(self, uri: Optional[str]) -> bool:
        """
        Check whether the engine can render a given URI

        Args:
            uri: URI of the template, or None when no template was found

        Returns:
            bool: True if the engine can render it
        """
        pass

    @abstractmethod
    def get_render_callback(self, uri: str, context: Optional[Mapping[str, Any]] = None) -> RenderCallback:
        """
        Get a callback that renders a URI within a context

        Args:
            uri: URI of the template to render
            context: Context to render the template with

        Returns:
            Callable taking the view being rendered and returning a string
        """
        pass


class AbstractEngine(Engine):
    """
    Engine that accepts URIs by extension

    Extensions are read from the 'Extensions' key of the engine's config,
    falling back to the class level `extensions`.
    """

    extensions: Tuple[str, ...] = ()

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        configured = self.config.get_key(EXTENSIONS_KEY, default=None)
        if configured is not None:
            if isinstance(configured, str):
                configured = [configured]
            self.extensions = tuple(configured)

    def can_render(self, uri: Optional[str]) -> bool:
        if not uri:
            return False
        return any(URIHelper.has_extension(uri, extension) for extension in self.extensions)

    def check_uri(self, uri: str) -> Path:
        """
        Make sure a URI points at a readable file

        Raises:
            FailedToLoadView: If the file does not exist
        """
        path = Path(uri)
        if not path.is_file():
            raise FailedToLoadView(f'Could not load view "{uri}".', uri=uri)
        return path

    def __repr__(self):
        return f'<{self.__class__.__name__} {list(self.extensions)}>'
