"""Types for the deploy module."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class UpdateResult:
    """Relevant fields of the UpdateFunctionCode response."""

    function_name: str
    architecture: str
    code_sha256: Optional[str] = None
    last_update_status: Optional[str] = None
    revision_id: Optional[str] = None

    @classmethod
    def from_response(cls, function_name: str, architecture: str, response: dict) -> "UpdateResult":
        architectures = response.get("Architectures") or [architecture]
        return cls(
            function_name=response.get("FunctionName", function_name),
            architecture=architectures[0],
            code_sha256=response.get("CodeSha256"),
            last_update_status=response.get("LastUpdateStatus"),
            revision_id=response.get("RevisionId"),
        )

    def to_dict(self) -> dict:
        return {
            "function_name": self.function_name,
            "architecture": self.architecture,
            "code_sha256": self.code_sha256,
            "last_update_status": self.last_update_status,
            "revision_id": self.revision_id,
        }
