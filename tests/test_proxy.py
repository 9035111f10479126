import pytest

from fluentql import InputType, ObjectType, Resolver, input_type, object_type, resolver
from fluentql.core.proxy import proxy, self_invoking_class


def test_self_invoking_class_forwards_args_and_ignores_ctx():
    class Point:
        def __init__(self, x, y=0):
            self.x = x
            self.y = y

    p = self_invoking_class(Point, object(), (3,), {'y': 4})
    assert isinstance(p, Point)
    assert (p.x, p.y) == (3, 4)


def test_factory_and_direct_construction_are_equivalent(fn):
    ctx = lambda payload: ('committed', payload)
    direct = Resolver(ctx).resolve(fn).arg('id', str, True).end()
    via_factory = resolver(ctx).resolve(fn).arg('id', str, True).end()
    assert direct[0] == via_factory[0] == 'committed'
    assert direct[1].resolve is via_factory[1].resolve is fn
    assert list(direct[1].args) == list(via_factory[1].args) == ['id']
    assert type(direct[1].args['id'].type) is type(via_factory[1].args['id'].type)


def test_factory_builds_instances_of_the_class():
    assert type(resolver()) is Resolver
    assert type(object_type('User')) is ObjectType
    assert type(input_type('UserInput')) is InputType
    assert type(Resolver.factory()) is Resolver


def test_factory_on_subclass_builds_subclass():
    class TracingResolver(Resolver):
        pass

    assert type(TracingResolver.factory()) is TracingResolver


def test_constructor_errors_propagate_unchanged():
    @proxy(apply=self_invoking_class)
    class Strict:
        def __init__(self, value):
            if value < 0:
                raise ValueError("negative")
            self.value = value

    assert Strict.factory(1).value == 1
    with pytest.raises(ValueError, match="negative"):
        Strict.factory(-1)
    with pytest.raises(TypeError):
        Strict.factory()


def test_custom_apply_trap_receives_target_and_args():
    calls = []

    def apply(target, ctx, args, kwargs):
        calls.append((target, ctx, args, kwargs))
        return self_invoking_class(target, ctx, args, kwargs)

    @proxy(apply=apply)
    class Box:
        def __init__(self, *items, label=None):
            self.items = items
            self.label = label

    box = Box.factory(1, 2, label='b')
    assert box.items == (1, 2) and box.label == 'b'
    assert calls == [(Box, None, (1, 2), {'label': 'b'})]
