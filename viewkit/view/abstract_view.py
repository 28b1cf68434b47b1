"""
Abstract View
Shared rendering behavior for engine-backed views
"""
import sys
from typing import Any, Mapping, Optional, TYPE_CHECKING

from viewkit.engine.engine import Engine
from viewkit.view.context import ViewContext, build_context
from viewkit.view.view import View

if TYPE_CHECKING:
    from viewkit.view_builder import ViewBuilder


class AbstractView(View):
    """
    View that renders through its engine's render callback

    The engine callback receives the view itself, so templates can reach
    `view.uri`, `view.context` and `view.render_part(...)`.
    """

    def __init__(self, uri: str, engine: Engine):
        """
        Initialize the view

        Args:
            uri: URI of the template
            engine: Engine to render the template with
        """
        self.uri = uri
        self.engine = engine
        self.builder: Optional['ViewBuilder'] = None
        self.context = ViewContext()

    def render(self, context: Optional[Mapping[str, Any]] = None, echo: bool = False) -> str:
        """
        Render the view

        Args:
            context: Context to render the view with
            echo: Whether to also write the output to stdout

        Returns:
            Rendered output

        Raises:
            FailedToProcessConfig: If the fallback builder config could not be processed
            FailedToLoadView: If the engine cannot read the template
        """
        self.initialize_view_builder()
        self.context = build_context(context)

        callback = self.engine.get_render_callback(self.uri, self.context)
        output = callback(self)

        if echo:
            sys.stdout.write(output)

        return output

    def render_part(self, view_id: str, context: Optional[Mapping[str, Any]] = None, type: Any = None) -> str:
        """
        Render a partial view for a given view identifier

        Raises:
            FailedToInstantiateView: If the partial's view type could not be resolved
        """
        if context is None:
            context = self.context

        self.initialize_view_builder()
        view = self.builder.create(view_id, type)

        return view.render(context)

    def set_builder(self, builder: 'ViewBuilder') -> 'AbstractView':
        self.builder = builder
        return self

    def initialize_view_builder(self):
        """Fall back to the shared builder of the Views facade"""
        if self.builder is None:
            from viewkit.views import Views
            self.builder = Views.get_view_builder()

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.uri!r}>'
