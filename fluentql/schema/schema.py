"""Schema builder opening the query and mutation root types."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from graphql import GraphQLObjectType, GraphQLSchema
from strawberry.schema.config import StrawberryConfig

from ..errors import DuplicateTypeError, SchemaError
from .base import Base
from .object_type import ObjectType

__all__ = ['Schema']

logger = logging.getLogger(__name__)

_ROOT_KINDS = ('query', 'mutation')


class Schema(Base):
    """Fluent builder for a complete GraphQL schema.

    Example:
        schema = (
            Schema(strawberry_config=StrawberryConfig(auto_camel_case=True))
            .query()
                .resolve('hello', str, True)
                    .resolve(lambda root, info, name: f"Hello, {name}")
                    .arg('name', str, True)
                .end()
            .end()
            .end()
        )

    The ``strawberry_config`` naming rules are forwarded to every root type
    opened from this builder.
    """

    def __init__(
        self,
        *,
        strawberry_config: Optional[StrawberryConfig] = None,
        cb: Optional[Callable[[GraphQLSchema], Any]] = None,
    ):
        super().__init__(cb)
        self._strawberry_config = strawberry_config
        self._roots: Dict[str, Optional[GraphQLObjectType]] = {}

    def _open_root(self, kind: str, name: str, description: Optional[str]) -> ObjectType:
        if kind in self._roots:
            raise DuplicateTypeError(f"Schema already declares a {kind} root type")
        self._roots[kind] = None

        def commit(gtype: GraphQLObjectType) -> 'Schema':
            self._roots[kind] = gtype
            return self

        return ObjectType(name, description, strawberry_config=self._strawberry_config, cb=commit)

    def query(self, name: str = 'Query', description: Optional[str] = None) -> ObjectType:
        return self._open_root('query', name, description)

    def mutation(self, name: str = 'Mutation', description: Optional[str] = None) -> ObjectType:
        return self._open_root('mutation', name, description)

    def end(self) -> Any:
        for kind in _ROOT_KINDS:
            if kind in self._roots and self._roots[kind] is None:
                raise SchemaError(f"The {kind} root type was opened but never ended")
        query = self._roots.get('query')
        if query is None:
            raise SchemaError("Schema requires a query root type; declare it with .query(...)")
        schema = GraphQLSchema(query=query, mutation=self._roots.get('mutation'))
        logger.debug("fluentql.schema: end roots=%s", [k for k in _ROOT_KINDS if k in self._roots])
        return super().end(schema)
