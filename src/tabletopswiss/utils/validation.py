"""Validation utilities for Tabletop Swiss.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Optional

from tabletopswiss.exceptions import InvalidPlayerDataException, InvalidScoreException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[object] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Victory Point Validation ==========


def validate_vp(value: object, field_name: str = "VP") -> ValidationResult:
    """Validate a victory point total.

    VP totals are non-negative integers. Booleans are rejected even though
    they are ``int`` subclasses.

    Example:
        >>> bool(validate_vp(72))
        True
        >>> validate_vp(-1).error_message
        'VP must not be negative (got -1)'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be an integer (got {value!r})",
        )

    if value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must not be negative (got {value})",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def require_vp(value: object, field_name: str = "VP") -> int:
    """Return ``value`` if it is a valid VP total.

    Raises:
        InvalidScoreException: If the value is negative or not an integer
    """
    result = validate_vp(value, field_name)
    if not result:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


# ========== Player Label Validation ==========


def validate_label(value: Optional[str], field_name: str) -> ValidationResult:
    """Validate a required free-text label such as a display name or faction."""
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


def require_label(value: Optional[str], field_name: str) -> str:
    """Return the stripped label, raising if it is empty.

    Raises:
        InvalidPlayerDataException: If the label is missing or blank
    """
    result = validate_label(value, field_name)
    if not result:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value
