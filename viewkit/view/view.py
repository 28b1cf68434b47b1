"""
View Interface
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class View(ABC):
    """
    Interface that all views must implement

    A view is bound to a URI and an engine, and renders within a context.
    """

    @abstractmethod
    def render(self, context: Optional[Mapping[str, Any]] = None, echo: bool = False) -> str:
        """
        Render the view

        Args:
            context: Context to render the view with
            echo: Whether to also write the output to stdout

        Returns:
            Rendered output
        """
        pass

    @abstractmethod
    def render_part(self, view_id: str, context: Optional[Mapping[str, Any]] = None, type: Any = None) -> str:
        """
        Render a partial view through the view's builder

        Args:
            view_id: View identifier to create a view for
            context: Context for the partial, defaults to the current one
            type: Type of view to create

        Returns:
            Rendered output of the partial
        """
        pass

    @abstractmethod
    def set_builder(self, builder) -> 'View':
        """Associate a view builder with this view"""
        pass

    @classmethod
    def can_handle(cls, uri: Optional[str]) -> bool:
        """Check whether this view class can handle a URI"""
        return True
