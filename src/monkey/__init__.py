# src/monkey/__init__.py
"""Runtime core of the Monkey scripting language.

Hand :func:`evaluate` an AST built from :mod:`monkey.monkey_ast` nodes and a
global :class:`Environment`; it returns one runtime Object.
"""
from .environment import Environment
from .evaluator import Evaluator, evaluate, BUILTINS

__version__ = "0.1.0"

__all__ = ['Environment', 'Evaluator', 'evaluate', 'BUILTINS', '__version__']
