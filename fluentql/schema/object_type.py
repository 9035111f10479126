"""Object type builder collecting plain and resolver-backed fields."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Set

from graphql import GraphQLArgument, GraphQLField, GraphQLObjectType
from strawberry.schema.config import StrawberryConfig

from ..core.naming import attribute_resolver, graphql_name
from ..core.proxy import proxy, self_invoking_class
from ..core.types import to_field_type
from ..errors import DuplicateArgumentError, DuplicateFieldError, EmptyTypeError, UnfinishedBuilderError
from .base import Base, ensure_finished_type
from .descriptors import FieldDef, ResolverDescriptor
from .resolver import Resolver

__all__ = ['ObjectType', 'object_type']

logger = logging.getLogger(__name__)


@proxy(apply=self_invoking_class)
class ObjectType(Base):
    """Fluent builder for a GraphQL object type.

    Example:
        user_type = (
            ObjectType('User')
            .field('id', strawberry.ID, True)
            .field('name', str)
            .resolve('posts', [post_type])
                .resolve(load_posts)
                .arg('limit', int)
            .end()
            .end()
        )

    ``resolve(...)`` opens a :class:`Resolver`; its ``end()`` commits the
    handler and arguments into the field and returns this builder.
    """

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        *,
        strawberry_config: Optional[StrawberryConfig] = None,
        cb: Optional[Callable[[GraphQLObjectType], Any]] = None,
    ):
        super().__init__(cb)
        self.name = name
        self.description = description
        self._strawberry_config = strawberry_config
        self._fields: Dict[str, FieldDef] = {}
        # public GraphQL name -> Python name
        self._public_names: Dict[str, str] = {}
        self._pending: Set[str] = set()

    def _declare(self, name: str, type_: Any, required: bool, description: Optional[str], deprecation_reason: Optional[str]) -> FieldDef:
        ensure_finished_type(type_, self.name, name)
        if name in self._fields:
            raise DuplicateFieldError(f"Field '{name}' is already declared on type '{self.name}'")
        public_name = graphql_name(name, self._strawberry_config)
        if public_name in self._public_names:
            raise DuplicateFieldError(
                f"Field '{name}' on type '{self.name}' is exposed as '{public_name}', "
                f"which field '{self._public_names[public_name]}' already uses"
            )
        fdef = FieldDef(
            name=name,
            type=to_field_type(type_, required),
            description=description,
            deprecation_reason=deprecation_reason,
        )
        self._fields[name] = fdef
        self._public_names[public_name] = name
        return fdef

    def field(
        self,
        name: str,
        type_: Any,
        required: bool = False,
        *,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
    ) -> 'ObjectType':
        """Declare a field served by the default resolver (attribute or key lookup)."""
        self._declare(name, type_, required, description, deprecation_reason)
        return self

    def resolve(
        self,
        name: str,
        type_: Any,
        required: bool = False,
        *,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
    ) -> Resolver:
        """Declare a field and open a :class:`Resolver` describing how it resolves."""
        fdef = self._declare(name, type_, required, description, deprecation_reason)
        self._pending.add(name)

        def commit(descriptor: ResolverDescriptor) -> 'ObjectType':
            self._check_argument_names(name, descriptor)
            fdef.resolve = descriptor.resolve
            fdef.args = descriptor.args
            self._pending.discard(name)
            return self

        return Resolver(commit)

    def _check_argument_names(self, field_name: str, descriptor: ResolverDescriptor) -> None:
        seen: Dict[str, str] = {}
        for arg_name in descriptor.args:
            public_arg = graphql_name(arg_name, self._strawberry_config)
            if public_arg in seen:
                raise DuplicateArgumentError(
                    f"Arguments '{seen[public_arg]}' and '{arg_name}' of field '{self.name}.{field_name}' "
                    f"are both exposed as '{public_arg}'"
                )
            seen[public_arg] = arg_name

    def _to_graphql_field(self, fdef: FieldDef, public_name: str) -> GraphQLField:
        args: Dict[str, GraphQLArgument] = {}
        for arg_name, adesc in fdef.args.items():
            public_arg = graphql_name(arg_name, self._strawberry_config)
            args[public_arg] = GraphQLArgument(
                adesc.type,
                default_value=adesc.default_value,
                description=adesc.description,
                out_name=arg_name if public_arg != arg_name else None,
            )
        resolve = fdef.resolve
        if resolve is None and public_name != fdef.name:
            resolve = attribute_resolver(fdef.name)
        return GraphQLField(
            fdef.type,
            args=args,
            resolve=resolve,
            description=fdef.description,
            deprecation_reason=fdef.deprecation_reason,
        )

    def end(self) -> Any:
        if not self._fields:
            raise EmptyTypeError(f"Object type '{self.name}' must declare at least one field")
        if self._pending:
            pending = ", ".join(sorted(self._pending))
            raise UnfinishedBuilderError(
                f"Resolver for field(s) {pending} on type '{self.name}' was opened but never ended"
            )
        fields: Dict[str, GraphQLField] = {}
        for name, fdef in self._fields.items():
            public_name = graphql_name(name, self._strawberry_config)
            fields[public_name] = self._to_graphql_field(fdef, public_name)
        gtype = GraphQLObjectType(self.name, fields=fields, description=self.description)
        logger.debug("fluentql.object_type: end %s fields=%s", self.name, list(fields))
        return super().end(gtype)


object_type = ObjectType.factory
