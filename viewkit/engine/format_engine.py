"""
Python Format Engine
Renders plain text templates with str.format_map
"""
from typing import Any, Mapping, Optional

from viewkit.defaults import DEFAULT_FORMAT_EXTENSIONS, DEFAULT_TEMPLATE_ENCODING
from viewkit.engine.engine import AbstractEngine, RenderCallback


class PythonFormatEngine(AbstractEngine):
    """
    Plain text engine using Python format strings

    Template:
        Hello {name}, you have {count} new messages.
    """

    extensions = DEFAULT_FORMAT_EXTENSIONS

    def __init__(self, config=None):
        super().__init__(config)
        self.encoding = self.config.get_key('Encoding', default=DEFAULT_TEMPLATE_ENCODING)

    def get_render_callback(self, uri: str, context: Optional[Mapping[str, Any]] = None) -> RenderCallback:
        path = self.check_uri(uri)
        context = dict(context or {})

        def render(view=None) -> str:
            source = path.read_text(encoding=self.encoding)
            variables = dict(context)
            if view is not None:
                variables.setdefault('view', view)
            return source.format_map(variables)

        return render
