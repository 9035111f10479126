from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from graphql import Undefined

__all__ = ['ArgumentDescriptor', 'ResolverDescriptor', 'FieldDef', 'InputFieldDef']


@dataclass(frozen=True)
class ArgumentDescriptor:
    """One declared resolver argument.

    Attributes:
        type: graphql-core input type after the list/required modifiers.
        description: Optional GraphQL argument description.
        default_value: Default used by graphql-core when the argument is
            omitted; ``Undefined`` means no default.
    """

    type: Any
    description: Optional[str] = None
    default_value: Any = Undefined


@dataclass(frozen=True)
class ResolverDescriptor:
    """Finalized output of :meth:`Resolver.end`.

    ``args`` is a read-only snapshot; later calls on the builder never
    change a descriptor that was already handed out.
    """

    resolve: Optional[Callable[..., Any]]
    args: Mapping[str, ArgumentDescriptor] = field(default_factory=lambda: MappingProxyType({}))


@dataclass
class FieldDef:
    """Normalized output field collected by an object type builder.

    Attributes:
        name: Python name of the field (before naming conversion).
        type: graphql-core output type after modifiers.
        resolve: Resolution callable, or None for the default resolver.
        args: Argument descriptors keyed by Python argument name.
    """

    name: str
    type: Any
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None
    resolve: Optional[Callable[..., Any]] = None
    args: Mapping[str, ArgumentDescriptor] = field(default_factory=dict)


@dataclass
class InputFieldDef:
    name: str
    type: Any
    description: Optional[str] = None
    default_value: Any = Undefined
