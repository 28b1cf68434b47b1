"""
HTTP Package
"""
from viewkit.http.response import view_response

__all__ = [
    'view_response',
]
