# object.py
from collections import namedtuple

from .environment import Environment

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
NULL_OBJ = "NULL"
STRING_OBJ = "STRING"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"

_UINT64_MASK = (1 << 64) - 1
_FNV64_OFFSET = 0xcbf29ce484222325
_FNV64_PRIME = 0x100000001b3


# Content-based identity used to index Hash objects
HashKey = namedtuple("HashKey", ["type", "value"])

HashPair = namedtuple("HashPair", ["key", "value"])


def fnv1a_64(data):
    h = _FNV64_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV64_PRIME) & _UINT64_MASK
    return h


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"


class Hashable:
    """Mixin for objects usable as Hash keys."""

    def hash_key(self):
        raise NotImplementedError


class Integer(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ
    def hash_key(self): return HashKey(INTEGER_OBJ, self.value & _UINT64_MASK)


class Boolean(Object, Hashable):
    _interned = {}

    def __new__(cls, value):
        # TRUE and FALSE are the only two instances
        value = bool(value)
        inst = cls._interned.get(value)
        if inst is None:
            inst = super().__new__(cls)
            inst.value = value
            cls._interned[value] = inst
        return inst

    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ
    def hash_key(self): return HashKey(BOOLEAN_OBJ, 1 if self.value else 0)


class Null(Object):
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def inspect(self): return "null"
    def type(self): return NULL_OBJ


class String(Object, Hashable):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def __str__(self): return self.value

    def hash_key(self):
        return HashKey(STRING_OBJ, fnv1a_64(self.value.encode("utf-8")))


class Array(Object):
    def __init__(self, elements): self.elements = elements
    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"
    def type(self): return ARRAY_OBJ


class Hash(Object):
    def __init__(self, pairs=None):
        self.pairs = pairs if pairs is not None else {}  # dict of HashKey -> HashPair

    def type(self): return HASH_OBJ

    def inspect(self):
        pairs = [f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()]
        return "{" + ", ".join(pairs) + "}"

    def get(self, key, default=None):
        """Look up by a Hashable key object."""
        pair = self.pairs.get(key.hash_key())
        return pair.value if pair is not None else default


class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ


class EvaluationError(Object):
    """An error travelling through the evaluator as an ordinary value."""

    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ
    def __str__(self): return self.message


class Function(Object):
    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = parameters, body, env

    def inspect(self):
        params = ", ".join([str(p) for p in self.parameters])
        return f"fn({params}) {{\n{self.body}\n}}"

    def type(self): return FUNCTION_OBJ


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # Stores the native Python function
        self.name = name

    def inspect(self):
        return f"<built-in function: {self.name}>"

    def type(self):
        return BUILTIN_OBJ


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value):
    return TRUE if value else FALSE


__all__ = [
    "Object", "Hashable", "HashKey", "HashPair", "Integer", "Boolean", "Null",
    "String", "Array", "Hash", "ReturnValue", "EvaluationError", "Function",
    "Builtin", "Environment", "TRUE", "FALSE", "NULL", "native_bool_to_boolean",
    "fnv1a_64",
]
