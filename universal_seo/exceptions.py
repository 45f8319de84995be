"""
Custom Exception Classes for Universal SEO

Raised only on the operator-facing surface (settings, override editing,
storage). Page rendering never raises: a missing override is silently
indistinguishable from no override configured.
"""

from typing import Any

from fastapi import status


class SEOException(Exception):
    """Base exception class for all Universal SEO exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(SEOException):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


class UnsupportedPostTypeError(ValidationError):
    """Raised when overrides are saved for a post type without the SEO meta box"""

    def __init__(self, post_type: str, allowed_types: list[str]):
        super().__init__(
            message=f"Post type '{post_type}' does not support SEO overrides",
            field="post_type",
            details={"post_type": post_type, "allowed_types": allowed_types},
        )


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(SEOException):
    """Base class for resource not found errors"""

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class LocaleNotSupportedError(ResourceNotFoundError):
    """Raised when a locale is not in the configured supported-locale list"""

    def __init__(self, locale: str):
        super().__init__(resource_type="Locale", resource_id=locale)


# ============================================================================
# Storage Exceptions
# ============================================================================


class StorageError(SEOException):
    """Raised when reading or writing persisted SEO data fails"""

    def __init__(self, message: str = "A storage error occurred", operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
