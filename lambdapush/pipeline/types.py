"""Types for the pipeline orchestrator.

PipelineStage is the run's state machine:
  RESOLVING -> COMPILING -> PACKAGING -> UPLOADING -> UPDATING_FUNCTION
            -> CLEANING_UP -> DONE
Any failure jumps straight to CLEANING_UP -> FAILED.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from lambdapush.deploy.types import UpdateResult
from lambdapush.errors import PushError
from lambdapush.packaging.types import UploadResult
from lambdapush.target.types import DeploymentTarget


class PipelineStage(str, Enum):
    RESOLVING = "resolving"
    COMPILING = "compiling"
    PACKAGING = "packaging"
    UPLOADING = "uploading"
    UPDATING_FUNCTION = "updating_function"
    CLEANING_UP = "cleaning_up"
    DONE = "done"
    FAILED = "failed"


# reporter(stage, message) — receives human-readable progress lines
Reporter = Callable[[PipelineStage, str], None]


@dataclass
class PipelineResult:
    """Outcome of one run.

    failed_stage is the stage that raised; error is the primary failure,
    normally a PushError but any Exception escaping a stage lands here too.
    cleanup_error is recorded separately when removal also failed after
    an earlier stage had already failed.
    """

    target: DeploymentTarget
    stage: PipelineStage = PipelineStage.COMPILING
    failed_stage: Optional[PipelineStage] = None
    error: Optional[Exception] = None
    cleanup_error: Optional[PushError] = None
    archive_size: Optional[int] = None
    upload: Optional[UploadResult] = None
    update: Optional[UpdateResult] = None
    artifact_removed: bool = False

    @property
    def is_success(self) -> bool:
        return self.stage is PipelineStage.DONE

    @property
    def exit_code(self) -> int:
        return 0 if self.is_success else 1

    def to_dict(self) -> dict:
        return {
            "target": self.target.to_dict(),
            "stage": self.stage.value,
            "failed_stage": self.failed_stage.value if self.failed_stage else None,
            "error": str(self.error) if self.error else None,
            "cleanup_error": str(self.cleanup_error) if self.cleanup_error else None,
            "archive_size": self.archive_size,
            "upload": self.upload.to_dict() if self.upload else None,
            "update": self.update.to_dict() if self.update else None,
            "artifact_removed": self.artifact_removed,
            "exit_code": self.exit_code,
        }
