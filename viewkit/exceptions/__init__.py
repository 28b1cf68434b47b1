"""
Exceptions Package
Centralized view component errors
"""
from viewkit.exceptions.custom import (
    ViewException,
    InvalidLocation,
    FailedToInstantiateView,
    FailedToInstantiateFinder,
    FailedToProcessConfig,
    FailedToLoadView,
)

__all__ = [
    'ViewException',
    'InvalidLocation',
    'FailedToInstantiateView',
    'FailedToInstantiateFinder',
    'FailedToProcessConfig',
    'FailedToLoadView',
]
