"""Errors that abort a conversion run."""


class StepError(Exception):
    """Base class for failures reported to the user with a non-zero exit."""


class XCResultDecodeError(StepError):
    """Raised when the test results JSON cannot be decoded."""


class XCResultToolError(StepError):
    """Raised when xcresulttool cannot be run or exits with an error."""

    def __init__(self, message: str, *, exit_code: int | None, stderr: str) -> None:
        """Store the exit code and captured diagnostics of the failed command."""
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr


class OutputWriteError(StepError):
    """Raised when the JUnit report cannot be written."""


class ExportError(StepError):
    """Raised when the output path cannot be exported."""
