"""Self-invoking builder classes.

``@proxy(apply=self_invoking_class)`` attaches a ``factory`` classmethod to a
builder class so it can be obtained through a plain function call, e.g.
``resolver = Resolver.factory`` and then ``resolver(cb)``, next to the usual
``Resolver(cb)``. Both paths run the same constructor.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence, Type, TypeVar

__all__ = ['ApplyTrap', 'proxy', 'self_invoking_class']

T = TypeVar('T')

ApplyTrap = Callable[[Type[Any], Any, Sequence[Any], Optional[Dict[str, Any]]], Any]


def self_invoking_class(target: Type[T], ctx: Any, args: Sequence[Any], kwargs: Optional[Dict[str, Any]] = None) -> T:
    """Construct ``target`` with the forwarded call arguments.

    Args:
        target: Builder class to instantiate.
        ctx: Receiver of the call site. Never used; kept so every apply trap
            shares one signature.
        args: Positional arguments of the bare call.
        kwargs: Keyword arguments of the bare call, if any.

    Returns:
        A new ``target`` instance, exactly as ``target(*args, **kwargs)``.
    """
    return target(*args, **(kwargs or {}))


def proxy(*, apply: ApplyTrap) -> Callable[[Type[T]], Type[T]]:
    """Class decorator installing ``apply`` as the class's call trap.

    The trap is exposed as the ``factory`` classmethod, so subclasses of a
    decorated class build instances of themselves.
    """
    def decorator(cls: Type[T]) -> Type[T]:
        def factory(target, *args, **kwargs):
            return apply(target, None, args, kwargs)

        factory.__name__ = 'factory'
        factory.__qualname__ = f"{cls.__qualname__}.factory"
        factory.__doc__ = f"Build a :class:`{cls.__name__}` from a bare function call."
        setattr(cls, 'factory', classmethod(factory))
        return cls
    return decorator
