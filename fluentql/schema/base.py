from __future__ import annotations

from typing import Any, Callable, Optional

from ..core.types import is_list_declaration, list_element_of
from ..errors import UnfinishedBuilderError

__all__ = ['Base', 'ensure_finished_type']


class Base:
    """Shared lifecycle of every builder.

    A builder is constructed with ``cb``, the context that owns it (usually a
    closure created by the parent builder). ``end(payload)`` hands the
    finished payload to ``cb`` and returns whatever ``cb`` returns, which is
    how a chain climbs back to the parent builder. A builder without ``cb``
    returns the payload itself.
    """

    def __init__(self, cb: Optional[Callable[[Any], Any]] = None):
        self._cb = cb

    def end(self, payload: Any) -> Any:
        if self._cb is None:
            return payload
        return self._cb(payload)


def ensure_finished_type(type_: Any, owner: str, field_name: str) -> None:
    """Reject a builder declared as a field type, also inside ``[T]``.

    Types must be finished (``.end()`` called) before they are referenced.
    """
    while is_list_declaration(type_):
        type_ = list_element_of(type_)
    if isinstance(type_, Base):
        name = getattr(type_, 'name', type(type_).__name__)
        raise UnfinishedBuilderError(
            f"Field '{field_name}' on '{owner}' uses the builder for '{name}' as its type; "
            f"call .end() on it first and pass the returned type"
        )
