"""
View Finder
Builds the view object for a template URI
"""
from typing import Optional, Sequence

from viewkit.defaults import VIEWS_KEY
from viewkit.finder.abstract_finder import AbstractFinder
from viewkit.logging import getLogger
from viewkit.view.view import View

logger = getLogger(__name__)


class ViewFinder(AbstractFinder):
    """
    Finder instantiating the first configured view class that handles a URI

    View classes are built with `(uri, engine)`. A class may narrow what it
    handles with a `can_handle(uri)` classmethod.
    """

    collection_key = VIEWS_KEY

    def find(self, criteria: Sequence[Optional[str]], engine=None) -> View:
        for uri in self._usable_criteria(criteria):
            for name, entry in self.get_found_classes().items():
                factory, _ = self.resolve_entry(name, entry)
                can_handle = getattr(factory, 'can_handle', None)
                if can_handle is not None and not can_handle(uri):
                    continue

                view = factory(uri, engine)
                if isinstance(view, View):
                    return view

                logger.warning(
                    "Configured view did not produce a View",
                    extra={'view_name': name, 'uri': uri}
                )

        logger.warning("No view found, using null object", extra={'criteria': list(criteria)})
        return self.get_null_object()
