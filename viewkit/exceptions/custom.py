"""
Custom Exception Classes
View component exceptions with default messages
"""
from typing import Any, Optional


class ViewException(Exception):
    """Base exception for all view component exceptions"""
    message = "A view error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class InvalidLocation(ViewException):
    """
    Invalid location exception

    Raised when a value that is not a Location is added to or looked up in
    a Locations collection

    Example:
        raise InvalidLocation('Invalid location to check existence for: 42.')
    """
    message = "Invalid location"


class FailedToInstantiateView(ViewException):
    """
    View instantiation exception

    Raised when a requested view type could not be turned into a View

    Example:
        raise FailedToInstantiateView("Could not instantiate view 'json'.", view_type='json')
    """
    message = "Could not instantiate view"

    def __init__(self, message: Optional[str] = None, view_type: Any = None):
        super().__init__(message)
        self.view_type = view_type


class FailedToInstantiateFinder(ViewException):
    """
    Finder instantiation exception

    Raised when a finder could not build one of its configured objects
    """
    message = "Could not instantiate finder object"


class FailedToProcessConfig(ViewException):
    """
    Configuration exception

    Raised when a configuration source is missing or malformed

    Example:
        raise FailedToProcessConfig("Config key 'ViewFinder' is not a mapping.")
    """
    message = "Could not process config"


class FailedToLoadView(ViewException):
    """
    View loading exception

    Raised when an engine is asked to render a URI it cannot read
    """
    message = "Could not load view"

    def __init__(self, message: Optional[str] = None, uri: Optional[str] = None):
        super().__init__(message)
        self.uri = uri
