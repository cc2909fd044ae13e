"""
Puzzle input providers.
"""

from .inputs import INPUT_URL_TEMPLATE, InputError, InputLoader, InputProvider, StaticInputProvider

__all__ = [
    "INPUT_URL_TEMPLATE",
    "InputError",
    "InputLoader",
    "InputProvider",
    "StaticInputProvider",
]
