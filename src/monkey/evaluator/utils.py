# src/monkey/evaluator/utils.py
import logging

from ..config import config as monkey_config
from ..object import EvaluationError, ReturnValue, TRUE, FALSE, NULL, native_bool_to_boolean

logger = logging.getLogger("monkey.evaluator")

# Summary counters for lightweight summary logging
EVAL_SUMMARY = {
    'evaluated_statements': 0,
    'errors': 0,
    'function_calls': 0,
    'builtin_calls': 0,
    'max_statements_in_block': 0,
}


def reset_summary():
    for key in EVAL_SUMMARY:
        EVAL_SUMMARY[key] = 0


def debug_log(message, data=None, level='debug'):
    """Conditional debug logging that respects the runtime config."""
    if not monkey_config.should_log(level):
        return
    log = logger.error if level == 'error' else logger.debug
    if data is not None:
        log("%s: %s", message, data)
    else:
        log("%s", message)


def is_error(obj):
    return isinstance(obj, EvaluationError)


def is_interrupt(obj):
    """ReturnValue and EvaluationError stop a statement sequence."""
    return isinstance(obj, (ReturnValue, EvaluationError))


def is_truthy(obj):
    # Only false and null are falsy; 0, "" and [] are all truthy
    if obj is NULL or obj is FALSE:
        return False
    return True


def new_error(message):
    EVAL_SUMMARY['errors'] += 1
    debug_log("  Error created", message, level='error')
    return EvaluationError(message)


__all__ = [
    'EVAL_SUMMARY', 'reset_summary', 'debug_log', 'is_error', 'is_interrupt',
    'is_truthy', 'new_error', 'native_bool_to_boolean', 'TRUE', 'FALSE', 'NULL',
]
