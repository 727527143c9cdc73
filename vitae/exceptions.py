"""Error kinds raised by vitae, each carrying enough context to print a remedy."""

from pathlib import Path
from typing import Optional


class VitaeError(Exception):
    """Base class for all errors surfaced to the CLI boundary."""

    pass


class MissingArgumentError(VitaeError):
    """
    Exception raised when a required input is neither passed nor stored.

    Classification only: the CLI decides how to present it.

    Attributes:
        field: Name of the missing input (e.g., 'name', 'company')
        remedy: Command the user can run to fix it
        suggested_value: Example value for the missing input
    """

    def __init__(
        self,
        field: str,
        remedy: Optional[str] = None,
        suggested_value: Optional[str] = None,
    ):
        self.field = field
        self.remedy = remedy
        self.suggested_value = suggested_value

        parts = [f"Missing required argument: {field}"]

        if suggested_value:
            parts.append(f"Example value: {suggested_value}")

        if remedy:
            parts.append(f"Try running: {remedy}")

        super().__init__("\n".join(parts))


class SettingsParseError(VitaeError):
    """
    Exception raised when the structured settings file cannot be parsed.

    Attributes:
        path: Settings file that failed to parse
        original_error: The underlying YAML/validation error
    """

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        parts = [f"Unable to parse settings file: {path}"]
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class SettingsWriteError(VitaeError):
    """
    Exception raised when the settings file cannot be opened or written.

    Attributes:
        path: Target settings file
        original_error: The underlying OSError
    """

    def __init__(self, path: Path, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error

        parts = [f"Unable to write settings file: {path}"]
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class AssetNotFoundError(VitaeError):
    """Exception raised when a bundled asset (image, font) is missing."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Bundled asset not found: {path}")


class RenderError(VitaeError):
    """
    Exception raised when a document tree cannot be laid out or written.

    A malformed tree is a programming error, so callers treat this as fatal.

    Attributes:
        message: Error description
        original_error: The layout engine or filesystem error
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error

        parts = [message]
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class PostProcessError(VitaeError):
    """Exception raised when the PDF shrink tool cannot be started at all."""

    def __init__(self, executable: str, original_error: Optional[Exception] = None):
        self.executable = executable
        self.original_error = original_error

        parts = [f"Unable to run PDF post-processor: {executable}"]
        if original_error:
            parts.append(f"Original error: {original_error}")
        parts.append("Install Ghostscript or rerun with --no-shrink.")

        super().__init__("\n".join(parts))
