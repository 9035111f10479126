"""Resolver builder: one resolution callback plus its typed arguments."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional

from graphql import Undefined

from ..core.proxy import proxy, self_invoking_class
from ..core.types import to_list_type_if_needed, to_required_type_if_needed
from ..errors import DuplicateResolutionError
from .base import Base
from .descriptors import ArgumentDescriptor, ResolverDescriptor

__all__ = ['Resolver', 'resolver']

logger = logging.getLogger(__name__)


@proxy(apply=self_invoking_class)
class Resolver(Base):
    """Fluent builder describing how a single field is resolved.

    Example:
        descriptor = (
            Resolver()
            .resolve(lambda root, info, id, limit=None: ...)
            .arg('id', strawberry.ID, True)
            .arg('limit', int)
            .end()
        )

    When opened from :meth:`ObjectType.resolve`, ``end()`` commits the
    descriptor into that field and returns the object type builder.
    """

    def __init__(self, cb: Optional[Callable[[ResolverDescriptor], Any]] = None):
        super().__init__(cb)
        self._callee: Optional[Callable[..., Any]] = None
        self._arguments: Dict[str, ArgumentDescriptor] = {}

    def resolve(self, callee: Callable[..., Any]) -> 'Resolver':
        """Declare the resolve handler.

        Raises:
            DuplicateResolutionError: A handler is already declared on this
                builder.
        """
        if callable(self._callee):
            raise DuplicateResolutionError()
        self._callee = callee
        return self

    def arg(
        self,
        name: str,
        type_: Any,
        required: bool = False,
        *,
        description: Optional[str] = None,
        default_value: Any = Undefined,
    ) -> 'Resolver':
        """Declare an argument of the resolve handler.

        ``type_`` may be a graphql-core input type, a Python scalar (``int``,
        ``str``, ``strawberry.ID`` ...) or a one-element list ``[T]`` for a
        list argument. ``required`` wraps the final type, list included.
        A repeated ``name`` replaces the earlier declaration.
        """
        type_ = to_required_type_if_needed(to_list_type_if_needed(type_), required)
        self._arguments[name] = ArgumentDescriptor(
            type=type_, description=description, default_value=default_value
        )
        return self

    def end(self) -> Any:
        descriptor = ResolverDescriptor(
            resolve=self._callee,
            args=MappingProxyType(dict(self._arguments)),
        )
        logger.debug(
            "fluentql.resolver: end resolve=%r args=%s",
            getattr(self._callee, '__name__', self._callee),
            list(self._arguments),
        )
        return super().end(descriptor)


resolver = Resolver.factory
