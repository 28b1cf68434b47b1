"""
Engine Finder
Selects the rendering engine able to deal with a template URI
"""
from typing import List, Optional, Sequence

from viewkit.defaults import ENGINES_KEY
from viewkit.engine.engine import Engine
from viewkit.exceptions import FailedToInstantiateFinder
from viewkit.finder.abstract_finder import AbstractFinder
from viewkit.logging import getLogger

logger = getLogger(__name__)


class EngineFinder(AbstractFinder):
    """
    Finder returning the first configured engine that can render a URI

    Engines are built on first use, in config order, and reused afterwards.
    """

    collection_key = ENGINES_KEY

    def __init__(self, config=None):
        super().__init__(config)
        self._engines: Optional[List[Engine]] = None

    def get_engines(self) -> List[Engine]:
        """Get the engine instances, building them on first access"""
        with self._lock:
            if self._engines is None:
                engines = []
                for name, entry in self.get_found_classes().items():
                    factory, settings = self.resolve_entry(name, entry)
                    engine = factory(settings) if settings is not None else factory()
                    if not isinstance(engine, Engine):
                        raise FailedToInstantiateFinder(
                            f"Engine '{name}' did not produce an Engine instance."
                        )
                    engines.append(engine)
                self._engines = engines
        return self._engines

    def find(self, criteria: Sequence[Optional[str]], engine=None) -> Engine:
        for uri in self._usable_criteria(criteria):
            for candidate in self.get_engines():
                if candidate.can_render(uri):
                    logger.debug(
                        "Engine selected",
                        extra={'uri': uri, 'engine': candidate.__class__.__name__}
                    )
                    return candidate

        return self.get_null_object()
