"""
Data quality error classifications for contact list processing.

These exceptions categorize the input-shape problems that can occur when a
caller hands over a phone book or a reference date.
"""

from typing import Optional, Dict, Any


class ContactDataError(Exception):
    """Base class for data quality issues that can be handled gracefully."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedReferenceDateError(ContactDataError):
    """Reference date does not have the DD.MM.YYYY shape."""
    
    def __init__(self, message: str, raw_date: Optional[Any] = None, 
                 expected_format: str = "DD.MM.YYYY", **kwargs):
        super().__init__(message, **kwargs)
        self.raw_date = raw_date
        self.expected_format = expected_format


class NonSequenceInputError(ContactDataError, TypeError):
    """Contacts argument is not a list or tuple."""
    
    def __init__(self, message: str, received_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.received_type = received_type


class MalformedContactDateError(ContactDataError):
    """Contact birthdate cannot be split into day, month and year."""
    
    def __init__(self, message: str, birthdate: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.birthdate = birthdate


class MalformedContactError(ContactDataError):
    """Contact record is missing fields or carries values of the wrong type."""
    
    def __init__(self, message: str, field: Optional[str] = None, 
                 raw_data: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_data = raw_data
