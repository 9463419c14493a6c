"""Decorators that render a bar's statistics as text, with formatting and moving averages."""

__version__ = "0.1.0"