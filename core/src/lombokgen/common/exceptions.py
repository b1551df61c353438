from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for lombokgen operations.

    Error codes categorize failures without creating numerous exception
    classes. Each category uses its own prefix for easy identification.

    Attributes:
        CONFIG_*: Configuration-related errors
        VALIDATION_*: Input validation errors
        PLUGIN_*: Plugin lifecycle and selection-state errors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"

    # Plugin errors
    PLUGIN_NOT_CONFIGURED = "PLUGIN_001"
    SELECTION_FROZEN = "PLUGIN_002"
    REGISTRY_FROZEN = "PLUGIN_003"
    DUPLICATE_FEATURE = "PLUGIN_004"


class LombokGenError(Exception):
    """Base exception for all lombokgen errors.

    Uses error codes for categorization instead of a deep exception
    hierarchy.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # lazy import to avoid circular dependency
        from lombokgen.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


# Helper functions for common error scenarios
def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> LombokGenError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        **kwargs: Additional error details

    Returns:
        LombokGenError with VALIDATION_ERROR code
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return LombokGenError(
        message=message,
        error_code=ErrorCode.VALIDATION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def selection_frozen_error(feature_key: str) -> LombokGenError:
    """Create an error for a write attempted on a compiled selection."""
    return LombokGenError(
        message=(
            f"Cannot modify feature '{feature_key}': the selection was frozen "
            f"when compilation finished."
        ),
        error_code=ErrorCode.SELECTION_FROZEN,
        details={"feature": feature_key},
    )


def plugin_not_configured_error(checkpoint: str) -> LombokGenError:
    """Create an error for a checkpoint invoked before set_properties()."""
    return LombokGenError(
        message=(
            f"Checkpoint '{checkpoint}' was invoked before the plugin was configured. "
            f"Call set_properties() first."
        ),
        error_code=ErrorCode.PLUGIN_NOT_CONFIGURED,
        details={"checkpoint": checkpoint},
    )


def feature_registration_error(
    feature_key: str,
    message: str,
    error_code: ErrorCode = ErrorCode.REGISTRY_FROZEN,
) -> LombokGenError:
    """Create an error for a rejected feature registration.

    Args:
        feature_key: Configuration key of the rejected feature
        message: Error message
        error_code: REGISTRY_FROZEN or DUPLICATE_FEATURE

    Returns:
        LombokGenError with the given code
    """
    return LombokGenError(
        message=message,
        error_code=error_code,
        details={"feature": feature_key},
    )
