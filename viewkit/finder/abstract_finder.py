"""
Abstract Finder
Shared logic for finders that build their candidates from configuration
"""
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

from viewkit.defaults import CLASS_NAME_KEY, NULL_OBJECT_KEY
from viewkit.exceptions import FailedToInstantiateFinder
from viewkit.support.class_loader import ClassLoader
from viewkit.support.config import Config


class AbstractFinder(ABC):
    """
    Base class for finders

    A finder reads a name -> class mapping from the `collection_key` of its
    config and a `NullObject` class name. Each entry is either a class name
    (registered name or dotted path), a class/factory, or a mapping with a
    'ClassName' key plus settings handed to the object as its own Config.

    Example config:
        {
            'ClassName': 'viewkit.finder.EngineFinder',
            'Engines': {
                'JinjaEngine': 'viewkit.engine.JinjaEngine',
                'Markdown': {'ClassName': 'myapp.MarkdownEngine', 'Extensions': ['.md']},
            },
            'NullObject': 'viewkit.engine.NullEngine',
        }
    """

    collection_key: str = ''

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self._lock = threading.Lock()
        self._null_object = None

    def get_found_classes(self) -> Dict[str, Any]:
        """Get the configured name -> class entries, in config order"""
        found = self.config.get_key(self.collection_key, default={})
        if not isinstance(found, Mapping):
            raise FailedToInstantiateFinder(
                f"'{self.collection_key}' of {self.__class__.__name__} must be a mapping."
            )
        return dict(found)

    def resolve_entry(self, name: str, entry: Any) -> Tuple[Any, Optional[Config]]:
        """
        Turn a configured entry into a factory plus its own config

        Raises:
            FailedToInstantiateFinder: If the entry cannot be loaded
        """
        settings = None
        if isinstance(entry, Mapping):
            settings = Config(entry)
            entry = settings.get_key(CLASS_NAME_KEY, default=None)

        if isinstance(entry, str):
            try:
                entry = ClassLoader.resolve(entry)
            except (ImportError, AttributeError) as e:
                raise FailedToInstantiateFinder(
                    f"Could not load class for '{name}' in {self.__class__.__name__}: {e}"
                ) from e

        if not callable(entry):
            raise FailedToInstantiateFinder(
                f"Entry '{name}' in {self.__class__.__name__} is not a class or factory."
            )

        return entry, settings

    def get_null_object(self):
        """
        Get the null object of the finder

        The null object is built once and reused.

        Raises:
            FailedToInstantiateFinder: If no usable NullObject is configured
        """
        with self._lock:
            if self._null_object is None:
                entry = self.config.get_key(NULL_OBJECT_KEY, default=None)
                if entry is None:
                    raise FailedToInstantiateFinder(
                        f"No '{NULL_OBJECT_KEY}' configured for {self.__class__.__name__}."
                    )
                factory, settings = self.resolve_entry(NULL_OBJECT_KEY, entry)
                self._null_object = factory(settings) if settings is not None else factory()
        return self._null_object

    @abstractmethod
    def find(self, criteria: Sequence[Optional[str]], engine=None):
        """
        Find a result for the given criteria

        Args:
            criteria: Criteria to match, usually URIs
            engine: Engine to hand to the result, when the finder builds views

        Returns:
            Matching object, or the finder's null object
        """
        pass

    @staticmethod
    def _usable_criteria(criteria: Sequence[Optional[str]]) -> List[str]:
        return [criterion for criterion in criteria if criterion]

    def __repr__(self):
        return f'<{self.__class__.__name__} ({len(self.get_found_classes())} entries)>'
