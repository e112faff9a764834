"""Builtins and type-level primitives the core depends on.

Bound once at import so that later rebinding of names in ``builtins`` (or on
``type``/``object``) cannot redirect the core's internal operations.
"""

import builtins

is_instance = builtins.isinstance
namespace_of = builtins.vars
define_on_type = type.__setattr__
define_on_object = object.__setattr__
type_of = builtins.type

PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)

mro_of = type.__dict__["__mro__"].__get__
