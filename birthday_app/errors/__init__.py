"""
Error classification for contact list processing.

Input-shape problems raise ContactDataError subclasses; the query layer turns
the detectable ones into failed results instead of propagating them.
"""

from .data_quality import (
    ContactDataError,
    MalformedReferenceDateError,
    NonSequenceInputError,
    MalformedContactDateError,
    MalformedContactError,
)
from .system_failures import ConfigurationError

__all__ = [
    # Data Quality Errors
    "ContactDataError",
    "MalformedReferenceDateError",
    "NonSequenceInputError",
    "MalformedContactDateError",
    "MalformedContactError",
    # System Failures
    "ConfigurationError",
]
