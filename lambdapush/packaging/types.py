"""Types for the packaging module."""

from dataclasses import dataclass
from typing import Optional

from lambdapush.target.types import Architecture


@dataclass(frozen=True)
class PackagedArchive:
    """A finished single-entry zip, held in memory until upload.

    entry_name is "bootstrap" for arm64 and "main" for x86_64.
    """

    content: bytes
    entry_name: str
    architecture: Architecture

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class UploadResult:
    """Where the archive landed in S3."""

    bucket: str
    key: str
    etag: Optional[str] = None
    version_id: Optional[str] = None

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket}/{self.key}"

    def to_dict(self) -> dict:
        return {
            "bucket": self.bucket,
            "key": self.key,
            "etag": self.etag,
            "version_id": self.version_id,
        }
