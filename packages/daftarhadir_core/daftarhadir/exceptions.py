"""
Exceptions for attendance sheet generation.

A missing date range is not an error: the renderer simply produces nothing.
These exceptions cover input that cannot be parsed at all, broken config
files and PDF output that cannot be written.
"""

from typing import Any, Dict, Optional
import traceback


class DaftarHadirError(Exception):
    """
    Base exception for attendance sheet errors.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None,
                 error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message
            cause: Causing exception
            error_code: Error code
            details: Additional details
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.error_code = error_code
        self.details = details or {}
        self.traceback = traceback.format_exc() if cause is not None else None

    def get_error_info(self) -> Dict[str, Any]:
        """
        Get error information.

        Returns:
            Dictionary with error information
        """
        return {
            'message': self.message,
            'cause': str(self.cause) if self.cause else None,
            'error_code': self.error_code,
            'details': self.details,
            'traceback': self.traceback
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


class ValidationError(DaftarHadirError):
    """
    Raised when a form payload value cannot be interpreted.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 field_value: Optional[Any] = None, cause: Optional[Exception] = None,
                 error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            field_name: Name of the payload field
            field_value: Offending value
            cause: Causing exception
            error_code: Error code
            details: Additional details
        """
        super().__init__(message, cause, error_code, details)
        self.field_name = field_name
        self.field_value = field_value

    def get_error_info(self) -> Dict[str, Any]:
        info = super().get_error_info()
        info.update({
            'field_name': self.field_name,
            'field_value': self.field_value
        })
        return info


class ConfigurationError(DaftarHadirError):
    """
    Raised when a sheet configuration file cannot be loaded.
    """

    def __init__(self, message: str, config_path: Optional[str] = None,
                 cause: Optional[Exception] = None, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, cause, error_code, details)
        self.config_path = config_path

    def get_error_info(self) -> Dict[str, Any]:
        info = super().get_error_info()
        info['config_path'] = self.config_path
        return info


class RenderingError(DaftarHadirError):
    """
    Raised when the PDF document cannot be produced or written.
    """

    def __init__(self, message: str, output_path: Optional[str] = None,
                 cause: Optional[Exception] = None, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, cause, error_code, details)
        self.output_path = output_path

    def get_error_info(self) -> Dict[str, Any]:
        info = super().get_error_info()
        info['output_path'] = self.output_path
        return info
