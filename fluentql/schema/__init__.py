# Fluent schema builders; each ``end()`` hands its result to the owner.
from .base import Base
from .descriptors import ArgumentDescriptor, FieldDef, InputFieldDef, ResolverDescriptor
from .input_type import InputType, input_type
from .object_type import ObjectType, object_type
from .resolver import Resolver, resolver
from .schema import Schema

__all__ = [
    'Base', 'ArgumentDescriptor', 'FieldDef', 'InputFieldDef', 'ResolverDescriptor',
    'InputType', 'input_type', 'ObjectType', 'object_type', 'Resolver', 'resolver', 'Schema',
]
