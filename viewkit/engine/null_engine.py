"""
Null Engine
Engine used when no other engine applies
"""
from typing import Any, Mapping, Optional

from viewkit.engine.engine import Engine, RenderCallback


class NullEngine(Engine):
    """Accepts every URI and renders nothing"""

    def __init__(self, config=None):
        self.config = config

    def can_render(self, uri: Optional[str]) -> bool:
        return True

    def get_render_callback(self, uri: Optional[str], context: Optional[Mapping[str, Any]] = None) -> RenderCallback:
        return lambda view=None: ''

    def __repr__(self):
        return '<NullEngine>'
