"""CLI commands for healthrank."""

from .assess import assess
from .compare import compare
from .reference import reference

__all__ = [
    "assess",
    "compare",
    "reference",
]
