"""
Location Package
"""
from viewkit.location.location import Location, FilesystemLocation
from viewkit.location.locations import Locations

__all__ = [
    'Location',
    'FilesystemLocation',
    'Locations',
]
