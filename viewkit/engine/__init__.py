"""
Engine Package
Rendering engines selected by the EngineFinder
"""
from viewkit.engine.engine import Engine, AbstractEngine, RenderCallback
from viewkit.engine.jinja_engine import JinjaEngine
from viewkit.engine.format_engine import PythonFormatEngine
from viewkit.engine.null_engine import NullEngine

__all__ = [
    'Engine',
    'AbstractEngine',
    'RenderCallback',
    'JinjaEngine',
    'PythonFormatEngine',
    'NullEngine',
]
