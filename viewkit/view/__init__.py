"""
View Package
View objects bound to a template URI and an engine
"""
from viewkit.view.view import View
from viewkit.view.context import ViewContext, build_context
from viewkit.view.abstract_view import AbstractView
from viewkit.view.base_view import BaseView
from viewkit.view.null_view import NullView

__all__ = [
    'View',
    'ViewContext',
    'build_context',
    'AbstractView',
    'BaseView',
    'NullView',
]
