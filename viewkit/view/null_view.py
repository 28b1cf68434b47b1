"""
Null View
Placeholder returned when no template matches a view identifier
"""
from typing import Any, Mapping, Optional

from viewkit.view.view import View


class NullView(View):
    """Renders to an empty string so callers never need to check for a missing view"""

    def __init__(self, uri: Optional[str] = None, engine=None):
        self.uri = uri
        self.engine = engine
        self.builder = None

    def render(self, context: Optional[Mapping[str, Any]] = None, echo: bool = False) -> str:
        return ''

    def render_part(self, view_id: str, context: Optional[Mapping[str, Any]] = None, type: Any = None) -> str:
        return ''

    def set_builder(self, builder) -> 'NullView':
        self.builder = builder
        return self

    def __repr__(self):
        return '<NullView>'
