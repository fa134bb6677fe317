# src/monkey/evaluator/expressions.py
from ..object import Integer, String, Array, Hash, HashPair, Hashable
from .utils import (
    is_error, debug_log, new_error, NULL, TRUE, FALSE, is_truthy, native_bool_to_boolean
)

_INT64_MIN = -(1 << 63)
_UINT64 = 1 << 64


def wrap_int64(value):
    """Reduce a Python int to the signed 64-bit range (two's complement)."""
    value = (value - _INT64_MIN) % _UINT64
    return value + _INT64_MIN


def truncating_div(left, right):
    # Python's // floors; the language truncates toward zero
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return quotient


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Literals, Math, Logic, Identifiers, Indexing."""

    def eval_identifier(self, node, env):
        debug_log("eval_identifier", f"Looking up: {node.value}")

        val = env.get(node.value)
        if val is not None:
            return val

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            debug_log("  Found builtin", node.value)
            return builtin

        return new_error(f"identifier not found: {node.value}")

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(wrap_int64(left_val + right_val))
        elif operator == "-":
            return Integer(wrap_int64(left_val - right_val))
        elif operator == "*":
            return Integer(wrap_int64(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero")
            return Integer(wrap_int64(truncating_div(left_val, right_val)))
        elif operator == "<":
            return native_bool_to_boolean(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean(left_val != right_val)

        return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_infix_expression(self, node, env):
        debug_log("eval_infix_expression", node.operator)

        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        return self.apply_infix_operator(node.operator, left, right)

    def apply_infix_operator(self, operator, left, right):
        if left.type() != right.type():
            return new_error(f"type mismatch: {left.type()} {operator} {right.type()}")

        # Type-specific dispatch
        if isinstance(left, Integer):
            return self.eval_integer_infix(operator, left, right)
        elif isinstance(left, String):
            return self.eval_string_infix(operator, left, right)

        # Everything else compares by identity (TRUE/FALSE/NULL are singletons)
        elif operator == "==":
            return native_bool_to_boolean(left is right)
        elif operator == "!=":
            return native_bool_to_boolean(left is not right)

        return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")

    def eval_prefix_expression(self, node, env):
        debug_log("eval_prefix_expression", node.operator)

        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        operator = node.operator

        if operator == "!":
            # !true = false, !false = true, !null = true, !anything_else = false
            if right is TRUE:
                return FALSE
            elif right is FALSE or right is NULL:
                return TRUE
            return FALSE
        elif operator == "-":
            if isinstance(right, Integer):
                return Integer(wrap_int64(-right.value))
            return new_error(f"unknown operator: -{right.type()}")

        return new_error(f"unknown operator: {operator}{right.type()}")

    def eval_if_expression(self, node, env):
        debug_log("eval_if_expression", "Evaluating condition")

        condition = self.eval_node(node.condition, env)
        if is_error(condition):
            return condition

        if is_truthy(condition):
            debug_log("  Condition true, evaluating consequence")
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            debug_log("  Condition false, evaluating alternative")
            return self.eval_node(node.alternative, env)

        debug_log("  Condition false, no alternative")
        return NULL

    def eval_expressions(self, exps, env):
        """Evaluate left to right; returns a list, or the first error."""
        results = []
        for e in exps:
            val = self.eval_node(e, env)
            if is_error(val):
                return val
            results.append(val)
        return results

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        index = self.eval_node(node.index, env)
        if is_error(index):
            return index

        if isinstance(left, Array) and isinstance(index, Integer):
            idx = index.value
            if idx < 0 or idx > len(left.elements) - 1:
                return NULL
            return left.elements[idx]
        if isinstance(left, Hash) and isinstance(index, Hashable):
            return left.get(index, NULL)

        return new_error(f"index operator not supported: {left.type()}")

    def eval_hash_literal(self, node, env):
        debug_log("  HashLiteral node", f"{len(node.pairs)} pairs")
        pairs = {}
        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if is_error(key):
                return key

            if not isinstance(key, Hashable):
                return new_error(f"unusable as hash key: {key.type()}")

            val = self.eval_node(value_node, env)
            if is_error(val):
                return val

            # A later duplicate replaces the stored key object too
            pairs[key.hash_key()] = HashPair(key, val)
        return Hash(pairs)
