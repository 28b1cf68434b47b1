"""
View Context
Structured key/value context handed to engines at render time
"""
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


class ViewContext(Mapping):
    """
    Read-only render context with mapping and attribute access

    Example:
        context = ViewContext({'title': 'Home'})
        context['title']         # 'Home'
        context.title            # 'Home'
        context.get('missing')   # None
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"View context has no key '{name}'") from None

    def with_values(self, **values) -> 'ViewContext':
        """Get a copy of the context with additional values"""
        data = dict(self._data)
        data.update(values)
        return ViewContext(data)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self):
        return f'ViewContext({self._data!r})'


def build_context(context: Optional[Mapping[str, Any]] = None, **extra) -> ViewContext:
    """
    Build a render context

    Args:
        context: User-provided context (mapping or ViewContext)
        **extra: Additional values, overriding the context

    Returns:
        ViewContext instance
    """
    if context is not None and not isinstance(context, Mapping):
        raise TypeError(
            f"View context must be a mapping, got {type(context).__name__}."
        )

    template_context: Dict[str, Any] = {}
    template_context.update(context or {})
    template_context.update(extra)

    return ViewContext(template_context)
