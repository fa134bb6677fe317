# src/monkey/ast_json.py
"""Decode an already-built AST from JSON.

The front end (lexer/parser) lives outside this package; hosts that keep
their ASTs as data can hand them over in this form instead. Every node is
an object whose ``"node"`` field names a :mod:`monkey.monkey_ast` class::

    {"node": "Program", "statements": [
        {"node": "LetStatement", "name": "x",
         "value": {"node": "IntegerLiteral", "value": 5}},
        {"node": "ExpressionStatement",
         "expression": {"node": "Identifier", "value": "x"}}]}

Identifiers in ``name`` and ``parameters`` may be plain strings. Hash pairs
are ``[key, value]`` arrays. Missing ``alternative`` means no else branch.
"""
import json

from . import monkey_ast

OPERATORS = frozenset(["!", "-", "+", "*", "/", "==", "!=", "<", ">"])
PREFIX_OPERATORS = frozenset(["!", "-"])


class AstDecodeError(ValueError):
    """Raised when a JSON document does not describe a well-formed AST."""


def _field(data, name):
    try:
        return data[name]
    except KeyError:
        raise AstDecodeError(f"{data.get('node', '?')} node is missing field {name!r}") from None


def _text(data, kind):
    value = _field(data, "value")
    if not isinstance(value, str):
        raise AstDecodeError(f"{kind} value must be a string, got {value!r}")
    return value


def _identifier(data):
    if isinstance(data, str):
        return monkey_ast.Identifier(data)
    node = decode_node(data)
    if not isinstance(node, monkey_ast.Identifier):
        raise AstDecodeError(f"expected Identifier, got {type(node).__name__}")
    return node


def _block(data):
    node = decode_node(data)
    if not isinstance(node, monkey_ast.BlockStatement):
        raise AstDecodeError(f"expected BlockStatement, got {type(node).__name__}")
    return node


def _nodes(items):
    if not isinstance(items, list):
        raise AstDecodeError(f"expected a list of nodes, got {type(items).__name__}")
    return [decode_node(item) for item in items]


def _integer(data):
    value = _field(data, "value")
    if isinstance(value, bool) or not isinstance(value, int):
        raise AstDecodeError(f"IntegerLiteral value must be an integer, got {value!r}")
    if not -(1 << 63) <= value < (1 << 63):
        raise AstDecodeError(f"IntegerLiteral value out of 64-bit range: {value}")
    return monkey_ast.IntegerLiteral(value)


def _boolean(data):
    value = _field(data, "value")
    if not isinstance(value, bool):
        raise AstDecodeError(f"Boolean value must be true or false, got {value!r}")
    return monkey_ast.Boolean(value)


def _parameters(items):
    if not isinstance(items, list):
        raise AstDecodeError(f"expected a list of parameters, got {type(items).__name__}")
    return [_identifier(item) for item in items]


def _operator(data, allowed):
    op = _field(data, "operator")
    if op not in allowed:
        raise AstDecodeError(f"unsupported operator {op!r} in {data['node']}")
    return op


def _hash_pairs(items):
    if not isinstance(items, list):
        raise AstDecodeError(f"expected a list of hash pairs, got {type(items).__name__}")
    pairs = []
    for pair in items:
        if not isinstance(pair, list) or len(pair) != 2:
            raise AstDecodeError("hash pairs must be [key, value] arrays")
        pairs.append((decode_node(pair[0]), decode_node(pair[1])))
    return pairs


_DECODERS = {
    "Program": lambda d: monkey_ast.Program(_nodes(_field(d, "statements"))),
    "BlockStatement": lambda d: monkey_ast.BlockStatement(_nodes(_field(d, "statements"))),
    "ExpressionStatement": lambda d: monkey_ast.ExpressionStatement(decode_node(_field(d, "expression"))),
    "LetStatement": lambda d: monkey_ast.LetStatement(
        _identifier(_field(d, "name")), decode_node(_field(d, "value"))),
    "ReturnStatement": lambda d: monkey_ast.ReturnStatement(decode_node(_field(d, "return_value"))),
    "Identifier": lambda d: monkey_ast.Identifier(_text(d, "Identifier")),
    "IntegerLiteral": _integer,
    "StringLiteral": lambda d: monkey_ast.StringLiteral(_text(d, "StringLiteral")),
    "Boolean": _boolean,
    "PrefixExpression": lambda d: monkey_ast.PrefixExpression(
        _operator(d, PREFIX_OPERATORS), decode_node(_field(d, "right"))),
    "InfixExpression": lambda d: monkey_ast.InfixExpression(
        decode_node(_field(d, "left")), _operator(d, OPERATORS), decode_node(_field(d, "right"))),
    "IfExpression": lambda d: monkey_ast.IfExpression(
        decode_node(_field(d, "condition")),
        _block(_field(d, "consequence")),
        _block(d["alternative"]) if d.get("alternative") is not None else None),
    "FunctionLiteral": lambda d: monkey_ast.FunctionLiteral(
        _parameters(_field(d, "parameters")), _block(_field(d, "body"))),
    "CallExpression": lambda d: monkey_ast.CallExpression(
        decode_node(_field(d, "function")), _nodes(_field(d, "arguments"))),
    "ArrayLiteral": lambda d: monkey_ast.ArrayLiteral(_nodes(_field(d, "elements"))),
    "IndexExpression": lambda d: monkey_ast.IndexExpression(
        decode_node(_field(d, "left")), decode_node(_field(d, "index"))),
    "HashLiteral": lambda d: monkey_ast.HashLiteral(_hash_pairs(_field(d, "pairs"))),
}


def decode_node(data):
    """Build a node (and its children) from a decoded JSON value."""
    if not isinstance(data, dict):
        raise AstDecodeError(f"expected a node object, got {type(data).__name__}")
    kind = data.get("node")
    decoder = _DECODERS.get(kind)
    if decoder is None:
        raise AstDecodeError(f"unknown node kind: {kind!r}")
    return decoder(data)


def loads(text):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AstDecodeError(f"invalid JSON: {e}") from e
    return decode_node(data)


def load(path):
    with open(path, "r", encoding="utf-8") as f:
        return loads(f.read())
