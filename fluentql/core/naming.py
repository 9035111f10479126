from __future__ import annotations

from typing import Any, Callable, Optional

from strawberry.schema.config import StrawberryConfig

__all__ = ['graphql_name', 'attribute_resolver']


def graphql_name(name: str, strawberry_config: Optional[StrawberryConfig]) -> str:
    """Public GraphQL name for a Python field or argument name.

    Without a config the name is used verbatim; otherwise the config's
    ``name_converter`` decides (``auto_camel_case`` turns ``post_id`` into
    ``postId``).
    """
    if not name or strawberry_config is None:
        return name
    return strawberry_config.name_converter.apply_naming_config(name)


def attribute_resolver(python_name: str) -> Callable[..., Any]:
    """Default resolver reading ``python_name`` from the parent value.

    Needed when the GraphQL name differs from the Python name, since
    graphql-core's default resolver looks up the GraphQL name.
    """
    def resolve(parent: Any, info: Any, **kwargs: Any) -> Any:
        if isinstance(parent, dict):
            return parent.get(python_name)
        return getattr(parent, python_name, None)
    resolve.__name__ = f"resolve_{python_name}"
    return resolve
