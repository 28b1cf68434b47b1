"""
Locations Collection
Ordered, duplicate-free set of view locations
"""
from typing import Any, Iterator, List

from viewkit.exceptions import InvalidLocation
from viewkit.location.location import Location


class Locations:
    """
    Collection of locations, kept in insertion order

    Insertion order is scan priority. Membership uses location equality
    (path and extensions), not identity, so a location constructed twice
    with the same content is only stored once.
    """

    def __init__(self, locations=None):
        """Initialize the collection, optionally seeding it with locations"""
        self._locations: List[Location] = []
        for location in locations or []:
            self.add(location)

    def add(self, location: Location) -> bool:
        """
        Add a location at the end of the collection if it does not already exist

        Args:
            location: Location to add

        Returns:
            bool: Whether the location was added

        Raises:
            InvalidLocation: If the value is not a Location
        """
        if self.has_location(location):
            return False

        self._locations.append(location)
        return True

    def has_location(self, location: Location) -> bool:
        """
        Check whether a given location is already registered

        Raises:
            InvalidLocation: If the value is not a Location
        """
        if not isinstance(location, Location):
            raise InvalidLocation(
                f'Invalid location to check existence for: {location!r}.'
            )

        return any(location == element for element in self._locations)

    def __contains__(self, location: Any) -> bool:
        return isinstance(location, Location) and self.has_location(location)

    def __iter__(self) -> Iterator[Location]:
        return iter(list(self._locations))

    def __len__(self):
        return len(self._locations)

    def __repr__(self):
        return f'<Locations ({len(self._locations)} locations)>'
