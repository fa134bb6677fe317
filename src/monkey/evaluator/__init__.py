# src/monkey/evaluator/__init__.py
from .core import Evaluator, evaluate
from .builtins import BUILTINS
from .utils import EVAL_SUMMARY, reset_summary, is_truthy

__all__ = ['Evaluator', 'evaluate', 'BUILTINS', 'EVAL_SUMMARY', 'reset_summary', 'is_truthy']
