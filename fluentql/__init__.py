"""FluentQL: fluent builders for graphql-core schemas.

Public API:
- Schema, ObjectType, InputType, Resolver (and the factories
  object_type, input_type, resolver)
- ArgumentDescriptor, ResolverDescriptor
- errors: FluentQLError, DuplicateResolutionError, DuplicateFieldError,
  DuplicateArgumentError, DuplicateTypeError, EmptyTypeError, SchemaError,
  UnfinishedBuilderError
"""
from __future__ import annotations

from .errors import (
    DuplicateArgumentError,
    DuplicateFieldError,
    DuplicateResolutionError,
    DuplicateTypeError,
    EmptyTypeError,
    FluentQLError,
    SchemaError,
    UnfinishedBuilderError,
)
from .schema import (
    ArgumentDescriptor,
    InputType,
    ObjectType,
    Resolver,
    ResolverDescriptor,
    Schema,
    input_type,
    object_type,
    resolver,
)


__all__ = [
    'Schema', 'ObjectType', 'InputType', 'Resolver',
    'object_type', 'input_type', 'resolver',
    'ArgumentDescriptor', 'ResolverDescriptor',
    'FluentQLError', 'DuplicateResolutionError', 'DuplicateFieldError', 'DuplicateArgumentError',
    'DuplicateTypeError', 'EmptyTypeError', 'SchemaError', 'UnfinishedBuilderError',
]
