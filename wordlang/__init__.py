"""Interpreter and Python code emitter for WordLang program trees."""

__version__ = "0.1.0"

__all__ = ["__version__"]