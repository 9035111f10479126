# Core helpers shared by the schema builders.
from .naming import attribute_resolver, graphql_name
from .proxy import proxy, self_invoking_class
from .types import (
    SCALAR_TYPES,
    is_list_declaration,
    to_field_type,
    to_graphql_scalar,
    to_list_type_if_needed,
    to_required_type_if_needed,
)

__all__ = [
    'attribute_resolver', 'graphql_name',
    'proxy', 'self_invoking_class',
    'SCALAR_TYPES', 'is_list_declaration', 'to_field_type', 'to_graphql_scalar',
    'to_list_type_if_needed', 'to_required_type_if_needed',
]
