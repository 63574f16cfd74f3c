"""Packaging module for zipping the binary and uploading it to S3.

Public API:
    package_artifact(artifact_path, architecture) -> PackagedArchive
    upload_archive(s3_client, bucket, key, archive, wait) -> UploadResult
"""

from lambdapush.packaging.archive import entry_name_for, package_artifact, read_entry
from lambdapush.packaging.types import PackagedArchive, UploadResult
from lambdapush.packaging.uploader import object_key_for, upload_archive

__all__ = [
    "package_artifact",
    "entry_name_for",
    "read_entry",
    "upload_archive",
    "object_key_for",
    "PackagedArchive",
    "UploadResult",
]
