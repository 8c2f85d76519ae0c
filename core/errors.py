"""Exceptions raised while converting a project template."""


class ConversionError(RuntimeError):
    """Base exception for project conversion errors."""
    pass


class InvalidArgumentError(ConversionError):
    """Raised when a command-line argument is missing or unsupported."""
    pass


class ParseFailureError(ConversionError):
    """
    Raised when a JSON configuration document cannot be parsed.

    Attributes:
        path: The file that failed to parse.
    """
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ManifestToolError(ConversionError):
    """
    Raised when the external manifest-editing tool fails.

    Attributes:
        returncode: Exit status of the tool, or None if it never started.
        stderr: Captured standard error output.
    """
    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
