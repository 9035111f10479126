"""Type modifiers applied to declared field and argument types.

A declared type goes through a fixed pipeline before it is stored:
Python scalars are mapped to graphql-core scalars, list-shaped declarations
become ``GraphQLList``, and finally ``required`` wraps the result in
``GraphQLNonNull``. Because the required wrapper runs last,
``required=True`` over ``[T]`` yields ``[T]!`` and never ``[T!]``.
"""
from __future__ import annotations

from typing import Any, Dict, get_args, get_origin

import strawberry
from graphql import (
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLString,
    is_non_null_type,
)

__all__ = [
    'SCALAR_TYPES',
    'is_list_declaration',
    'list_element_of',
    'to_graphql_scalar',
    'to_list_type_if_needed',
    'to_required_type_if_needed',
    'to_field_type',
]

SCALAR_TYPES: Dict[Any, Any] = {
    int: GraphQLInt,
    float: GraphQLFloat,
    str: GraphQLString,
    bool: GraphQLBoolean,
    strawberry.ID: GraphQLID,
}


def to_graphql_scalar(type_: Any) -> Any:
    """Map a Python scalar annotation to its graphql-core scalar.

    Anything that is not a known Python scalar is returned unchanged.
    """
    try:
        return SCALAR_TYPES.get(type_, type_)
    except TypeError:  # unhashable declaration, not a scalar
        return type_


def is_list_declaration(type_: Any) -> bool:
    """True when ``type_`` was declared as a list of one element type.

    Accepts the list-literal form ``[T]`` and the ``List[T]`` / ``list[T]``
    annotation form.
    """
    if isinstance(type_, list):
        return len(type_) == 1
    return get_origin(type_) is list and len(get_args(type_)) == 1


def list_element_of(type_: Any) -> Any:
    """Element type of a list declaration (``[T]`` or ``List[T]``)."""
    if isinstance(type_, list):
        return type_[0]
    return get_args(type_)[0]


def to_list_type_if_needed(type_: Any) -> Any:
    """Wrap a list-shaped declaration in ``GraphQLList``.

    Nested declarations (``[[int]]``) produce nested lists. Non-list
    declarations are returned with scalars converted and otherwise as is.
    """
    if is_list_declaration(type_):
        return GraphQLList(to_list_type_if_needed(list_element_of(type_)))
    return to_graphql_scalar(type_)


def to_required_type_if_needed(type_: Any, required: bool) -> Any:
    """Wrap ``type_`` in ``GraphQLNonNull`` when ``required`` is truthy.

    Raises:
        TypeError: ``type_`` is already non-null.
    """
    if required:
        if is_non_null_type(type_):
            raise TypeError(f"Can only create NonNull of a Nullable GraphQLType but got: {type_}.")
        return GraphQLNonNull(type_)
    return type_


def to_field_type(type_: Any, required: bool = False) -> Any:
    """Run the full list-then-required pipeline over a declared type."""
    return to_required_type_if_needed(to_list_type_if_needed(type_), required)
