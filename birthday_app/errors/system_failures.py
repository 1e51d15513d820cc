"""
System failure error classifications.

These exceptions represent problems that need a human to fix the setup
rather than the data passed to a single call.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Merged configuration failed validation."""
    
    def __init__(self, message: str, errors: Optional[list] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False
