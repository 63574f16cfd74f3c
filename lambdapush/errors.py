"""Error taxonomy for a deployment run.

Every error is terminal for the run: nothing is retried and nothing is
downgraded to a warning. The CLI catches PushError, prints it, and exits 1.
"""

from typing import Optional


class PushError(Exception):
    """Base class for all failures surfaced to the user."""


class ConfigurationError(PushError):
    """Missing name/region/bucket, bad source path, or malformed .pushrc.json."""


class BuildError(PushError):
    """Raised when the Go compiler fails or produces no binary.

    Carries the CompileResult so callers can echo the compiler's
    combined output verbatim.
    """

    def __init__(self, message: str, compile_result=None):
        self.compile_result = compile_result
        super().__init__(message)

    @property
    def output(self) -> str:
        return self.compile_result.output if self.compile_result else ""


class PackagingError(PushError):
    """Raised when the binary cannot be read or the zip cannot be written."""


class TransportError(PushError):
    """Raised when an AWS API call fails.

    Carries the service name and the original botocore exception.
    """

    service = "aws"

    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(f"[{self.service}] {message}")


class UploadError(TransportError):
    service = "s3"


class UpdateError(TransportError):
    service = "lambda"


class CleanupError(PushError):
    """Raised when the local build artifact cannot be removed."""
