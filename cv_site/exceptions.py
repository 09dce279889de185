"""exceptions.py
Defines custom exceptions for this project.
"""
from typing import Optional, List

# ------------------------ File Parser Errors ------------------------
class FileParserError(Exception):
    """Base exception for file parser errors."""
    pass

class FileNotSupportedError(FileParserError):
    """Raised when the current file path has an unsupported extension."""
    def __init__(
        self,
        extension: str,
        supported_extensions: List[str],
        context: Optional[str] = None
    ):
        self.extension = extension
        self.supported_extensions = supported_extensions
        message = (
            f"File with extension '{extension}' is not supported. "
            f"Supported extensions: {supported_extensions}"
        )
        if context:
            message += f" Context: {context}"
        super().__init__(message)

class FileTooLargeError(FileParserError):
    """Raised when a file exceeds the allowed file size."""
    def __init__(self, max_size: int, actual_size: int):
        super().__init__(
            f"File size is {actual_size} bytes, which exceeds the max allowed {max_size} bytes."
        )
        self.max_size = max_size
        self.actual_size = actual_size

class FileOpenError(FileParserError):
    """Raised when a file cannot be opened or read."""
    def __init__(self, file_path: str, original_error: str):
        super().__init__(
            f"Failed to open or read file: {file_path}. Original error: {original_error}"
        )
        self.file_path = file_path
        self.original_error = original_error

class FileEmptyError(FileParserError):
    """Raised when a file contains no parsable text."""
    def __init__(self, file_path: str, message: str | None = None):
        self.file_path = file_path
        if message is None:
            message = f"File `{file_path}` contains no parsable text."
        super().__init__(message)

# ------------------------ Text Source Errors ------------------------
class SourceUnavailableError(Exception):
    """
    Raised when a source cannot be acquired (network fetch failed, file missing,
    optional backend absent). Callers log it and move on to the next source.

    Attributes:
        source (str): URL, file path or source name that was unavailable.
        reason (str): Human-readable description of what went wrong.
    """
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Source unavailable: {source}. Reason: {reason}")

class TextSourceConfigError(Exception):
    """
    Raised when the list of TextSources handed to a TextExtractor is invalid.
    """
    def __init__(self, message: str):
        super().__init__(f"TextSourceConfigError: {message}")

# ------------------------ CvSiteFramework Errors ------------------------
class CvSiteError(Exception):
    """Base exception for the CV site pipeline."""
    pass

class CvSiteConfigError(CvSiteError):
    """
    Raised when a generate request or the CvSiteFramework configuration is invalid.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

class ExtractionInsufficientError(CvSiteError):
    """
    Raised when every source yielded less text than the viability threshold.

    Attributes:
        length (int): Stripped length of the best text found.
        minimum (int): Required minimum length.
    """
    def __init__(self, length: int, minimum: int, message: str | None = None):
        self.length = length
        self.minimum = minimum
        if message is None:
            message = (
                "Could not extract CV text from the provided shared page link or uploaded file "
                f"(got {length} characters, need at least {minimum}). Please ensure the link is a "
                "public share page or the uploaded file contains selectable CV text."
            )
        self.message = message
        super().__init__(message)

# ------------------------ Publish Errors ------------------------
class PublishConfigError(Exception):
    """Raised when a required configuration (in .env by default) for the publisher
    is missing or invalid."""

    def __init__(
        self,
        variable_name: str,
        message: str = None,
        extra_info: str = None
    ):
        """
        Args:
            variable_name: Name of the config variable.
            message: Optional custom message for the error.
            extra_info: Additional information to append to the error message.
        """
        if message is None:
            message = f"Missing or invalid configuration: {variable_name}. Please set it in your .env file."
        if extra_info:
            message += f" | {extra_info}"
        super().__init__(message)
        self.variable_name = variable_name
        self.extra_info = extra_info

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"

class PublishError(Exception):
    """Raised when the generator service or the repository API rejects a publish step."""
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        self.status_code = status_code
        self.response_text = response_text

        base_msg = message
        if status_code is not None:
            base_msg += f" | Status: {status_code}"
        if response_text:
            base_msg += f" | Response: {response_text[:500]}"

        super().__init__(base_msg)
