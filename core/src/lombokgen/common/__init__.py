"""Common exceptions for lombokgen.

The exception system uses error codes for categorization rather than
numerous specific exception classes. All exceptions are LombokGenError
instances carrying structured error information.
"""

from lombokgen.common.exceptions import (
    LombokGenError,
    ErrorCode,
    # Helper functions
    validation_error,
    selection_frozen_error,
    plugin_not_configured_error,
    feature_registration_error,
)

__all__ = [
    # Base Exception and Error Codes
    "LombokGenError",
    "ErrorCode",
    # Helper functions
    "validation_error",
    "selection_frozen_error",
    "plugin_not_configured_error",
    "feature_registration_error",
]
