"""Pytest coverage for runtime objects, hash keys and rendering."""

from monkey.object import (
    Integer, String, Boolean, Null, Array, Hash, HashPair, ReturnValue,
    EvaluationError, Function, Builtin, Environment, TRUE, FALSE, NULL,
    fnv1a_64,
)

from builders import block, ident, infix, let


def test_boolean_and_null_are_interned():
    assert Boolean(True) is TRUE
    assert Boolean(False) is FALSE
    assert Boolean(1) is TRUE
    assert Null() is NULL
    assert TRUE.value is True and FALSE.value is False


def test_string_hash_keys_match_by_content():
    hello1 = String("Hello World")
    hello2 = String("Hello World")
    diff = String("My name is johnny")
    assert hello1 is not hello2
    assert hello1.hash_key() == hello2.hash_key()
    assert hello1.hash_key() != diff.hash_key()


def test_hash_keys_are_tagged_by_type():
    assert Integer(1).hash_key() == Integer(1).hash_key()
    assert Integer(1).hash_key() != TRUE.hash_key()
    assert TRUE.hash_key().value == 1
    assert FALSE.hash_key().value == 0
    assert Integer(-1).hash_key().value == (1 << 64) - 1


def test_fnv1a_reference_values():
    assert fnv1a_64(b"") == 0xcbf29ce484222325
    assert fnv1a_64(b"a") == 0xaf63dc4c8601ec8c


def test_inspect_rendering():
    assert Integer(42).inspect() == "42"
    assert String("raw text").inspect() == "raw text"
    assert TRUE.inspect() == "true"
    assert NULL.inspect() == "null"
    assert Array([Integer(1), String("two"), NULL]).inspect() == "[1, two, null]"
    assert EvaluationError("boom").inspect() == "ERROR: boom"
    assert ReturnValue(Integer(3)).inspect() == "3"
    assert Builtin(lambda: NULL, "len").inspect() == "<built-in function: len>"


def test_hash_inspect_and_get():
    key = String("a")
    h = Hash({key.hash_key(): HashPair(key, Integer(1))})
    assert h.inspect() == "{a: 1}"
    assert h.get(String("a")).value == 1
    assert h.get(String("b")) is None


def test_type_tags():
    assert [o.type() for o in (Integer(1), String(""), TRUE, NULL, Array([]), Hash())] == [
        "INTEGER", "STRING", "BOOLEAN", "NULL", "ARRAY", "HASH"]
    assert ReturnValue(NULL).type() == "RETURN_VALUE"
    assert EvaluationError("x").type() == "ERROR"


def test_function_rendering_carries_parameters_and_body():
    body = block(let("z", infix(ident("x"), "*", ident("y"))), ident("z"))
    f = Function([ident("x"), ident("y")], body, Environment())
    assert f.type() == "FUNCTION"
    assert f.inspect() == "fn(x, y) {\nlet z = (x * y);z\n}"
