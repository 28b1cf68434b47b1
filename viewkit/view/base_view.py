"""
Base View
"""
from viewkit.view.abstract_view import AbstractView


class BaseView(AbstractView):
    """General purpose view, used when no more specific view applies"""
