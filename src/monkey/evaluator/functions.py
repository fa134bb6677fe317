# src/monkey/evaluator/functions.py
from ..environment import Environment
from ..object import Builtin, Function, ReturnValue
from .builtins import BUILTINS
from .utils import is_error, debug_log, logger, new_error, EVAL_SUMMARY


class FunctionEvaluatorMixin:
    """Handles function literals, calls and builtin application."""

    def __init__(self):
        # Shared, read-only registry of native functions
        self.builtins = BUILTINS

    def eval_function_literal(self, node, env):
        # Capture the defining scope by reference
        return Function(node.parameters, node.body, env)

    def eval_call_expression(self, node, env):
        debug_log("CallExpression node", node.function)

        fn = self.eval_node(node.function, env)
        if is_error(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if is_error(args):
            return args

        debug_log("  Arguments evaluated", len(args))
        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        if isinstance(fn, Function):
            EVAL_SUMMARY['function_calls'] += 1
            if len(args) != len(fn.parameters):
                return new_error(
                    f"wrong number of arguments. got={len(args)}, want={len(fn.parameters)}")

            new_env = Environment.child_of(fn.env)
            for param, arg in zip(fn.parameters, args):
                new_env.set(param.value, arg)
            debug_log("  Function parameters bound", [p.value for p in fn.parameters])

            res = self.eval_node(fn.body, new_env)
            if isinstance(res, ReturnValue):
                return res.value
            return res

        elif isinstance(fn, Builtin):
            EVAL_SUMMARY['builtin_calls'] += 1
            debug_log("  Calling builtin function", fn.name)
            try:
                return fn.fn(*args)
            except Exception as e:
                logger.exception("builtin %r raised", fn.name)
                return new_error(f"builtin error: {e}")

        return new_error(f"not a function: {fn.type()}")
