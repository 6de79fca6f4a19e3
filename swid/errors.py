"""
Exceptions raised while assembling tags.

Setters fail fast with InvalidArgumentError; structural problems only
surface from validate() as ValidationError.
"""
from __future__ import annotations
from typing import Optional


class SwidError(Exception):
    """Base class for all errors raised by this package"""


class InvalidArgumentError(SwidError, ValueError):
    """A setter received None, an empty string or an out-of-range value"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ValidationError(SwidError):
    """A builder failed one of its structural rules"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConfigError(SwidError):
    """Configuration could not be loaded"""
