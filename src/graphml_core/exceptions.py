"""
Exception hierarchy for the GraphML exporter.

Defines all exception types with error codes and correlation IDs.

Author: Goncharenko Anton aka alienxs2
License: MIT
"""

import uuid
from typing import Any, Dict, Optional


class GraphMLError(Exception):
    """
    Base exception for all exporter errors.

    Provides standard error attributes: message, error_code, details,
    correlation_id.

    Attributes:
        message: Human-readable error message
        error_code: Programmatic error code (e.g., "ATTR_001")
        details: Additional context (dict)
        correlation_id: UUID for tracing across layers
        original_exception: Wrapped exception (if any)

    Example:
        raise GraphMLError(
            message="Export failed",
            error_code="ERR_UNKNOWN",
            details={"graph": "routes"},
        )
    """

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize GraphMLError.

        Args:
            message: Error message
            error_code: Error code for programmatic handling
            details: Additional context dict
            correlation_id: UUID for request tracing
            original_exception: Original wrapped exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with all error information
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "correlation_id": self.correlation_id,
            "original_error": str(self.original_exception) if self.original_exception else None,
        }


class ValidationError(GraphMLError):
    """
    Raised when input validation fails.

    Error Codes:
        VAL_001: Invalid output path
        VAL_002: Duplicate vertex identifier
        VAL_003: Edge endpoint belongs to another graph
        VAL_004: Text holds a character XML 1.0 forbids
    """

    def __init__(self, message: str, error_code: str = "VAL_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class UnsupportedAttributeTypeError(GraphMLError):
    """
    Raised when an attribute value has no GraphML type mapping.

    Fatal for the whole export: the condition is deterministic, so the
    caller has to fix the value kind before retrying.

    Error Codes:
        ATTR_001: Value kind outside boolean/int/float/string

    Attributes:
        kind: Name of the offending Python type
        value: The offending value itself (for diagnosis)
    """

    def __init__(
        self,
        kind: str,
        value: Any,
        attribute_id: Optional[str] = None,
        error_code: str = "ATTR_001",
        **kwargs,
    ):
        details: Dict[str, Any] = {"kind": kind, "value": repr(value)}
        if attribute_id is not None:
            details["attribute_id"] = attribute_id
        super().__init__(
            message=f"Unable to convert Python type '{kind}' to GraphML type",
            error_code=error_code,
            details=details,
            **kwargs,
        )
        self.kind = kind
        self.value = value
        self.attribute_id = attribute_id


class ExportError(GraphMLError):
    """
    Raised when a finished document cannot be written out.

    Error Codes:
        EXP_001: File write failed
    """

    def __init__(self, message: str, error_code: str = "EXP_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
