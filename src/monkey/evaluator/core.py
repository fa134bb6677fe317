# src/monkey/evaluator/core.py
from .. import monkey_ast
from ..config import config as monkey_config
from ..environment import Environment
from ..object import Array, Integer, String
from .utils import debug_log, new_error, native_bool_to_boolean, is_error
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    def __init__(self):
        # FunctionEvaluatorMixin sets up builtins
        FunctionEvaluatorMixin.__init__(self)

    def eval_node(self, node, env):
        node_type = type(node)

        # === STATEMENTS ===
        if node_type == monkey_ast.Program:
            return self.eval_program(node.statements, env)

        elif node_type == monkey_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == monkey_ast.BlockStatement:
            return self.eval_block_statement(node, env)

        elif node_type == monkey_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        elif node_type == monkey_ast.LetStatement:
            return self.eval_let_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == monkey_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == monkey_ast.IntegerLiteral:
            return Integer(node.value)

        elif node_type == monkey_ast.StringLiteral:
            return String(node.value)

        elif node_type == monkey_ast.Boolean:
            return native_bool_to_boolean(node.value)

        elif node_type == monkey_ast.PrefixExpression:
            return self.eval_prefix_expression(node, env)

        elif node_type == monkey_ast.InfixExpression:
            return self.eval_infix_expression(node, env)

        elif node_type == monkey_ast.IfExpression:
            return self.eval_if_expression(node, env)

        elif node_type == monkey_ast.FunctionLiteral:
            return self.eval_function_literal(node, env)

        elif node_type == monkey_ast.CallExpression:
            return self.eval_call_expression(node, env)

        elif node_type == monkey_ast.ArrayLiteral:
            elems = self.eval_expressions(node.elements, env)
            if is_error(elems):
                return elems
            return Array(elems)

        elif node_type == monkey_ast.IndexExpression:
            return self.eval_index_expression(node, env)

        elif node_type == monkey_ast.HashLiteral:
            return self.eval_hash_literal(node, env)

        # Fallback
        debug_log("  Unknown node type", node_type.__name__, level='error')
        return new_error(f"unknown node type: {node_type.__name__}")


# Global Entry Point
def evaluate(program, env=None, debug_mode=False):
    """Evaluate ``program`` and return exactly one Object (possibly an error)."""
    if env is None:
        env = Environment()

    previous_level = monkey_config.debug_level
    if debug_mode:
        monkey_config.enable_debug()

    try:
        return Evaluator().eval_node(program, env)
    finally:
        monkey_config.set_level(previous_level)
