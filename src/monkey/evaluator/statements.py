# src/monkey/evaluator/statements.py
from ..object import ReturnValue
from .utils import is_error, is_interrupt, debug_log, EVAL_SUMMARY, NULL


class StatementEvaluatorMixin:
    """Handles evaluation of statement sequences, bindings and returns."""

    def eval_program(self, statements, env):
        debug_log("eval_program", f"Processing {len(statements)} statements")

        result = NULL
        for i, stmt in enumerate(statements):
            debug_log(f"  Statement {i+1}", type(stmt).__name__)
            res = self.eval_node(stmt, env)
            EVAL_SUMMARY['evaluated_statements'] += 1

            if isinstance(res, ReturnValue):
                debug_log("  ReturnValue encountered", res.value)
                return res.value
            if is_error(res):
                debug_log("  Error encountered", res.message)
                return res
            result = res

        debug_log("eval_program completed", result)
        return result

    def eval_block_statement(self, block, env):
        debug_log("eval_block_statement", f"len={len(block.statements)}")

        EVAL_SUMMARY['max_statements_in_block'] = max(
            EVAL_SUMMARY['max_statements_in_block'], len(block.statements))

        result = NULL
        for stmt in block.statements:
            res = self.eval_node(stmt, env)
            EVAL_SUMMARY['evaluated_statements'] += 1

            # Left wrapped: only the call site unwraps a ReturnValue
            if is_interrupt(res):
                debug_log("  Block interrupted", res.type())
                return res
            result = res

        return result

    def eval_let_statement(self, node, env):
        name = node.name.value
        debug_log("eval_let_statement", f"let {name}")

        value = self.eval_node(node.value, env)
        if is_error(value):
            return value

        env.set(name, value)
        return NULL

    def eval_return_statement(self, node, env):
        val = self.eval_node(node.return_value, env)
        if is_error(val):
            return val
        return ReturnValue(val)
