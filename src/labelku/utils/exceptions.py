"""
LabelKu - Custom Exceptions Module

This module defines custom exception classes for specific error cases
in the LabelKu application.
"""


class LabelkuError(Exception):
    """Base exception for all LabelKu errors.

    All custom exceptions should inherit from this class to allow
    catching any LabelKu-specific error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ValidationError(LabelkuError):
    """Raised when input validation fails."""

    def __init__(
        self,
        field: str,
        value: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            field: Name of the field that failed validation
            value: Optional value that failed validation
            reason: Optional reason for the validation failure
        """
        self.field = field
        self.value = value
        self.reason = reason

        msg = f"Validation error for '{field}'"
        if reason:
            msg += f": {reason}"

        super().__init__(msg)


class IncompleteFormError(ValidationError):
    """Raised when required shipping form fields are empty."""

    def __init__(self, missing: list[str]) -> None:
        """Initialize the exception.

        Args:
            missing: Names of the required fields that were left empty
        """
        self.missing = list(missing)
        super().__init__(", ".join(self.missing), reason="required field is empty")


class InvalidReceiptFileError(LabelkuError):
    """Raised when a receipt/form JSON file cannot be read or parsed."""

    def __init__(self, file_path: str, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            file_path: Path to the invalid input file
            reason: Optional reason why the file is invalid
        """
        self.file_path = file_path
        self.reason = reason
        msg = f"Invalid receipt file: {file_path}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg, details=f"path={file_path}")


class OutputPathError(LabelkuError):
    """Raised when there's an issue with the output path."""

    def __init__(self, output_path: str, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            output_path: The problematic output path
            reason: Optional reason for the error
        """
        self.output_path = output_path
        self.reason = reason

        msg = f"Output path error: {output_path}"
        if reason:
            msg += f" - {reason}"

        super().__init__(msg, details=f"path={output_path}")


# Exception hierarchy summary:
# LabelkuError (base)
# ├── ValidationError
# │   └── IncompleteFormError
# ├── InvalidReceiptFileError
# └── OutputPathError
