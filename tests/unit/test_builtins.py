"""Pytest coverage for the builtin function registry."""

import pytest

from monkey.evaluator import BUILTINS
from monkey.object import Array, Integer, String, EvaluationError, NULL


def _call(name, *args):
    return BUILTINS[name].fn(*args)


def _ints(*values):
    return Array([Integer(v) for v in values])


def test_registry_is_read_only():
    assert sorted(BUILTINS) == ["first", "last", "len", "push", "rest"]
    with pytest.raises(TypeError):
        BUILTINS["puts"] = BUILTINS["len"]


@pytest.mark.parametrize("arg, expected", [
    (String(""), 0),
    (String("four"), 4),
    (String("hello world"), 11),
    (String("héllo"), 6),
    (_ints(1, 2, 3), 3),
    (_ints(), 0),
])
def test_len(arg, expected):
    assert _call("len", arg).value == expected


@pytest.mark.parametrize("name, args, message", [
    ("len", (Integer(1),), "argument to `len` not supported, got INTEGER"),
    ("len", (String("one"), String("two")), "wrong number of arguments. got=2, want=1"),
    ("len", (), "wrong number of arguments. got=0, want=1"),
    ("first", (Integer(1),), "argument to `first` must be ARRAY, got INTEGER"),
    ("last", (String("x"),), "argument to `last` must be ARRAY, got STRING"),
    ("rest", (NULL,), "argument to `rest` must be ARRAY, got NULL"),
    ("push", (Integer(1), Integer(1)), "argument to `push` must be ARRAY, got INTEGER"),
    ("push", (_ints(),), "wrong number of arguments. got=1, want=2"),
])
def test_builtin_errors(name, args, message):
    result = _call(name, *args)
    assert isinstance(result, EvaluationError)
    assert result.message == message


def test_first_and_last():
    assert _call("first", _ints(1, 2, 3)).value == 1
    assert _call("last", _ints(1, 2, 3)).value == 3
    assert _call("first", _ints()) is NULL
    assert _call("last", _ints()) is NULL


def test_rest_builds_a_new_array():
    original = _ints(1, 2, 3)
    result = _call("rest", original)
    assert result is not original
    assert result.inspect() == "[2, 3]"
    assert original.inspect() == "[1, 2, 3]"
    assert _call("rest", _ints()) is NULL
    assert _call("rest", _ints(1)).inspect() == "[]"


def test_push_leaves_original_untouched():
    original = _ints(1, 2, 3)
    result = _call("push", original, Integer(4))
    assert result.inspect() == "[1, 2, 3, 4]"
    assert len(original.elements) == 3
    assert _call("push", _ints(), String("x")).inspect() == "[x]"
