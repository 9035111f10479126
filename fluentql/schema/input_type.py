"""Input object type builder for structured resolver arguments."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from graphql import GraphQLInputField, GraphQLInputObjectType, Undefined
from strawberry.schema.config import StrawberryConfig

from ..core.naming import graphql_name
from ..core.proxy import proxy, self_invoking_class
from ..core.types import to_field_type
from ..errors import DuplicateFieldError, EmptyTypeError
from .base import Base, ensure_finished_type
from .descriptors import InputFieldDef

__all__ = ['InputType', 'input_type']

logger = logging.getLogger(__name__)


@proxy(apply=self_invoking_class)
class InputType(Base):
    """Fluent builder for a GraphQL input object type.

    Resolvers receive input values as dicts keyed by the Python field names,
    regardless of the naming config.
    """

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        *,
        strawberry_config: Optional[StrawberryConfig] = None,
        cb: Optional[Callable[[GraphQLInputObjectType], Any]] = None,
    ):
        super().__init__(cb)
        self.name = name
        self.description = description
        self._strawberry_config = strawberry_config
        self._fields: Dict[str, InputFieldDef] = {}
        self._public_names: Dict[str, str] = {}

    def field(
        self,
        name: str,
        type_: Any,
        required: bool = False,
        *,
        description: Optional[str] = None,
        default_value: Any = Undefined,
    ) -> 'InputType':
        ensure_finished_type(type_, self.name, name)
        if name in self._fields:
            raise DuplicateFieldError(f"Field '{name}' is already declared on input type '{self.name}'")
        public_name = graphql_name(name, self._strawberry_config)
        if public_name in self._public_names:
            raise DuplicateFieldError(
                f"Field '{name}' on input type '{self.name}' is exposed as '{public_name}', "
                f"which field '{self._public_names[public_name]}' already uses"
            )
        self._fields[name] = InputFieldDef(
            name=name,
            type=to_field_type(type_, required),
            description=description,
            default_value=default_value,
        )
        self._public_names[public_name] = name
        return self

    def end(self) -> Any:
        if not self._fields:
            raise EmptyTypeError(f"Input type '{self.name}' must declare at least one field")
        fields: Dict[str, GraphQLInputField] = {}
        for name, fdef in self._fields.items():
            public_name = graphql_name(name, self._strawberry_config)
            fields[public_name] = GraphQLInputField(
                fdef.type,
                default_value=fdef.default_value,
                description=fdef.description,
                out_name=name if public_name != name else None,
            )
        gtype = GraphQLInputObjectType(self.name, fields=fields, description=self.description)
        logger.debug("fluentql.input_type: end %s fields=%s", self.name, list(fields))
        return super().end(gtype)


input_type = InputType.factory
