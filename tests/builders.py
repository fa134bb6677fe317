"""Terse constructors for hand-built ASTs used across the test suite."""
from monkey import monkey_ast as ast


def node(value):
    # bool before int: True is an int
    if isinstance(value, bool):
        return ast.Boolean(value)
    if isinstance(value, int):
        return ast.IntegerLiteral(value)
    return value


def stmt(value):
    value = node(value)
    if isinstance(value, ast.Expression):
        return ast.ExpressionStatement(value)
    return value


def program(*statements):
    return ast.Program([stmt(s) for s in statements])


def block(*statements):
    return ast.BlockStatement([stmt(s) for s in statements])


def ident(name):
    return ast.Identifier(name)


def string(value):
    return ast.StringLiteral(value)


def let(name, value):
    return ast.LetStatement(ident(name), node(value))


def ret(value):
    return ast.ReturnStatement(node(value))


def prefix(operator, right):
    return ast.PrefixExpression(operator, node(right))


def infix(left, operator, right):
    return ast.InfixExpression(node(left), operator, node(right))


def if_(condition, consequence, alternative=None):
    alt = block(*alternative) if alternative is not None else None
    return ast.IfExpression(node(condition), block(*consequence), alt)


def fn(params, *body):
    return ast.FunctionLiteral([ident(p) for p in params], block(*body))


def call(function, *args):
    function = ident(function) if isinstance(function, str) else node(function)
    return ast.CallExpression(function, [node(a) for a in args])


def array(*elements):
    return ast.ArrayLiteral([node(e) for e in elements])


def index(left, idx):
    return ast.IndexExpression(node(left), node(idx))


def hash_(*pairs):
    return ast.HashLiteral([(node(k), node(v)) for k, v in pairs])
