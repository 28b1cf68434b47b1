"""
Locations
Search roots that turn a view identifier into a template URI
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

from viewkit.support.uri_helper import URIHelper


class Location(ABC):
    """
    Interface that all view locations must implement

    A location is a search root plus the extensions it accepts. Two
    locations are equal when both their path and their extensions match.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Root path of the location"""

    @property
    @abstractmethod
    def extensions(self) -> Tuple[str, ...]:
        """Accepted extensions, in priority order"""

    @abstractmethod
    def get_uri(self, criteria: Sequence[str]) -> Optional[str]:
        """
        Get the URI of the first view matching the criteria

        Args:
            criteria: View identifiers to try, in order

        Returns:
            URI of the matching view, or None if nothing matches
        """

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return (self.path, self.extensions) == (other.path, other.extensions)

    def __hash__(self):
        return hash((self.path, self.extensions))


class FilesystemLocation(Location):
    """
    Location backed by a directory on disk

    Example:
        location = FilesystemLocation('resources/views', ['.html', '.txt'])
        location.get_uri(['pages/home'])  # 'resources/views/pages/home.html'
    """

    def __init__(self, path: Union[str, Path], extensions: Optional[Iterable[str]] = None):
        self._path = str(path)
        self._extensions = self._normalize_extensions(extensions)

    @property
    def path(self) -> str:
        return self._path

    @property
    def extensions(self) -> Tuple[str, ...]:
        return self._extensions

    def get_uri(self, criteria: Sequence[str]) -> Optional[str]:
        root = Path(self._path).resolve()
        for criterion in criteria:
            if not criterion:
                continue
            for candidate in self._candidates(criterion):
                file_path = Path(self._path) / candidate
                # Absolute criteria and '..' segments must stay under the root
                if not file_path.resolve().is_relative_to(root):
                    continue
                if file_path.is_file():
                    return str(file_path)
        return None

    def _candidates(self, criterion: str):
        # The criterion is tried as-is when it already carries an accepted extension
        if not self._extensions or any(
            URIHelper.has_extension(criterion, extension) for extension in self._extensions
        ):
            yield criterion
        for extension in self._extensions:
            yield f'{criterion}{extension}'

    @staticmethod
    def _normalize_extensions(extensions: Optional[Iterable[str]]) -> Tuple[str, ...]:
        if extensions is None:
            return ()
        if isinstance(extensions, str):
            extensions = [extensions]

        normalized = []
        for extension in extensions:
            if not extension:
                continue
            if not extension.startswith('.'):
                extension = f'.{extension}'
            if extension not in normalized:
                normalized.append(extension)
        return tuple(normalized)

    def __repr__(self):
        return f'<FilesystemLocation {self._path!r} {list(self._extensions)}>'
