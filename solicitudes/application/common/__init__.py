"""
Application common module.

Contains base classes for the application layer:
- Command: Base class for write operations
- Result: Success/Failure values returned by pipeline stages
"""

from .command import Command
from .result import Failure, Result, Success

__all__ = [
    "Command",
    "Failure",
    "Result",
    "Success",
]
