"""Archive uploader — puts the in-memory zip into S3.

One synchronous PutObject with the whole buffer; the archive is a single
static binary, far below the multipart threshold. Credentials come from
the client's session (default boto3 chain); nothing here touches them.

Read-after-write: S3 is strongly consistent for new and overwritten
objects, so by default the update step runs straight after the put.
Passing wait=True additionally polls HeadObject via the object_exists
waiter before returning.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from lambdapush.errors import UploadError
from lambdapush.packaging.types import PackagedArchive, UploadResult
from lambdapush.target.types import object_key_for

logger = logging.getLogger(__name__)

ARCHIVE_CONTENT_TYPE = "application/zip"

# object_exists waiter: poll every 2s, up to 15 attempts
WAITER_CONFIG = {"Delay": 2, "MaxAttempts": 15}

__all__ = ["upload_archive", "object_key_for"]


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        return f"{error.get('Code', 'Unknown')}: {error.get('Message', str(exc))}"
    return str(exc)


def upload_archive(
    s3_client,
    bucket: str,
    key: str,
    archive: PackagedArchive,
    wait: bool = False,
) -> UploadResult:
    """Store archive.content at s3://bucket/key, overwriting any previous object.

    Raises UploadError on any S3 or transport failure.
    """
    logger.info("Uploading %d bytes to s3://%s/%s", archive.size, bucket, key)

    try:
        response = s3_client.put_object(
            Bucket=bucket,
            Key=key,
            Body=archive.content,
            ContentType=ARCHIVE_CONTENT_TYPE,
        )
    except (ClientError, BotoCoreError) as exc:
        raise UploadError(
            f"PutObject s3://{bucket}/{key} failed: {_error_message(exc)}", exc,
        ) from exc

    if wait:
        logger.info("Waiting for s3://%s/%s to become visible", bucket, key)
        try:
            s3_client.get_waiter("object_exists").wait(
                Bucket=bucket, Key=key, WaiterConfig=WAITER_CONFIG,
            )
        except (WaiterError, ClientError, BotoCoreError) as exc:
            raise UploadError(
                f"s3://{bucket}/{key} not visible after upload: {exc}", exc,
            ) from exc

    result = UploadResult(
        bucket=bucket,
        key=key,
        etag=response.get("ETag"),
        version_id=response.get("VersionId"),
    )
    logger.info("Uploaded %s (etag=%s)", result.uri, result.etag)
    return result
