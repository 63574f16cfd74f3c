"""Types shared by every stage of the pipeline.

Architecture is the single source for every architecture-dependent value
(GOARCH, zip entry name, Lambda architecture string) so the entry name and
the advertised architecture cannot drift apart.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

# Compiled binary, written inside the source directory
ARTIFACT_NAME = "main"

# Per-project settings file, read from the source directory
RC_FILENAME = ".pushrc.json"

ARCHIVE_EXTENSION = ".zip"


def object_key_for(function_name: str) -> str:
    """Deterministic S3 key for a function's archive: <name>.zip."""
    return f"{function_name}{ARCHIVE_EXTENSION}"


class Architecture(str, Enum):
    """Target instruction-set family. Values are Lambda's canonical strings."""

    X86_64 = "x86_64"
    ARM64 = "arm64"

    @classmethod
    def from_flag(cls, arm: bool) -> "Architecture":
        return cls.ARM64 if arm else cls.X86_64

    @property
    def is_arm(self) -> bool:
        return self is Architecture.ARM64

    @property
    def goarch(self) -> str:
        return "arm64" if self.is_arm else "amd64"

    @property
    def entry_name(self) -> str:
        # provided.al2 runtimes look for "bootstrap"; go1.x looks for the handler name
        return "bootstrap" if self.is_arm else "main"

    @property
    def lambda_name(self) -> str:
        return self.value


class RcConfig(BaseModel):
    """Contents of .pushrc.json. All keys optional; unknown keys ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    bucket: str = ""
    region: str = ""
    arm: bool = False


@dataclass(frozen=True)
class DeploymentTarget:
    """Resolved parameters for one pipeline run. Immutable once built."""

    source_dir: Path
    function_name: str
    bucket: str
    region: str
    architecture: Architecture = Architecture.X86_64

    @property
    def artifact_path(self) -> Path:
        return self.source_dir / ARTIFACT_NAME

    @property
    def object_key(self) -> str:
        return object_key_for(self.function_name)

    def to_dict(self) -> dict:
        return {
            "source_dir": str(self.source_dir),
            "function_name": self.function_name,
            "bucket": self.bucket,
            "region": self.region,
            "architecture": self.architecture.value,
            "object_key": self.object_key,
        }
