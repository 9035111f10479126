"""Declaration-time errors raised by FluentQL builders.

Every error is raised synchronously to the caller of the fluent chain; none
of the builders recover locally. Wrapping an already non-null type raises a
plain ``TypeError``, as graphql-core's own wrappers do.
"""
from __future__ import annotations

__all__ = [
    'FluentQLError',
    'DuplicateResolutionError',
    'DuplicateFieldError',
    'DuplicateArgumentError',
    'DuplicateTypeError',
    'EmptyTypeError',
    'SchemaError',
    'UnfinishedBuilderError',
]


class FluentQLError(Exception):
    """Base class for all FluentQL declaration errors."""


class DuplicateResolutionError(FluentQLError):
    """A resolve handler was declared twice on the same Resolver builder."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Resolve handler already declared. "
            "Add this resolver to current object type "
            "before describing the new one."
        )


class DuplicateFieldError(FluentQLError, ValueError):
    """A field name was declared twice on the same object or input type."""


class DuplicateTypeError(FluentQLError, ValueError):
    """A schema root type (query/mutation) was opened twice."""


class EmptyTypeError(FluentQLError, ValueError):
    """An object or input type was finalized without any fields."""


class SchemaError(FluentQLError, ValueError):
    """The schema cannot be built from the declared root types."""


class DuplicateArgumentError(FluentQLError, ValueError):
    """Two arguments of one field map to the same public GraphQL name."""


class UnfinishedBuilderError(FluentQLError, ValueError):
    """A builder was used where its finished result is required."""
