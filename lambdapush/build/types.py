"""Types for the compile stage."""

from dataclasses import dataclass
from pathlib import Path

from lambdapush.target.types import Architecture


@dataclass
class CompileResult:
    """Outcome of one `go build` invocation.

    output is the compiler's combined stdout/stderr, kept verbatim: it is
    the only detailed diagnostic the pipeline has.
    """

    command: list[str]
    exit_code: int
    duration_seconds: float
    output: str = ""

    @property
    def is_success(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> dict:
        return {
            "command": " ".join(self.command),
            "exit_code": self.exit_code,
            "duration_seconds": round(self.duration_seconds, 3),
            "output_lines": self.output.count("\n") + 1 if self.output else 0,
            "is_success": self.is_success,
        }


@dataclass
class BuildArtifact:
    """The compiled executable for one run. Owned by the orchestrator."""

    path: Path
    architecture: Architecture
    compile_result: CompileResult

    @property
    def size(self) -> int:
        return self.path.stat().st_size
