# src/monkey/evaluator/builtins.py
"""Native functions reachable by name from any scope.

Each builtin validates its own arguments and reports misuse as an
EvaluationError. Arrays passed in are never modified: ``rest`` and
``push`` build new Array objects.
"""
from types import MappingProxyType

from ..object import Array, Builtin, Integer, String
from .utils import NULL, new_error


def _arity_error(got, want):
    return new_error(f"wrong number of arguments. got={got}, want={want}")


def _len(*a):
    if len(a) != 1:
        return _arity_error(len(a), 1)
    arg = a[0]
    if isinstance(arg, String):
        return Integer(len(arg.value.encode("utf-8")))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return new_error(f"argument to `len` not supported, got {arg.type()}")


def _first(*a):
    if len(a) != 1:
        return _arity_error(len(a), 1)
    if not isinstance(a[0], Array):
        return new_error(f"argument to `first` must be ARRAY, got {a[0].type()}")
    return a[0].elements[0] if a[0].elements else NULL


def _last(*a):
    if len(a) != 1:
        return _arity_error(len(a), 1)
    if not isinstance(a[0], Array):
        return new_error(f"argument to `last` must be ARRAY, got {a[0].type()}")
    return a[0].elements[-1] if a[0].elements else NULL


def _rest(*a):
    if len(a) != 1:
        return _arity_error(len(a), 1)
    if not isinstance(a[0], Array):
        return new_error(f"argument to `rest` must be ARRAY, got {a[0].type()}")
    if not a[0].elements:
        return NULL
    return Array(a[0].elements[1:])


def _push(*a):
    if len(a) != 2:
        return _arity_error(len(a), 2)
    if not isinstance(a[0], Array):
        return new_error(f"argument to `push` must be ARRAY, got {a[0].type()}")
    return Array(a[0].elements + [a[1]])


BUILTINS = MappingProxyType({
    "len": Builtin(_len, "len"),
    "first": Builtin(_first, "first"),
    "last": Builtin(_last, "last"),
    "rest": Builtin(_rest, "rest"),
    "push": Builtin(_push, "push"),
})
