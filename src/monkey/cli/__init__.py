# src/monkey/cli/__init__.py
