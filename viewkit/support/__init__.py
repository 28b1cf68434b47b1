"""
View Component Support Classes
"""

from viewkit.support.config import Config
from viewkit.support.class_loader import ClassLoader
from viewkit.support.uri_helper import URIHelper, has_extension, get_filename

__all__ = [
    'Config',
    'ClassLoader',
    'URIHelper',
    'has_extension',
    'get_filename',
]
