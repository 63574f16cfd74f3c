"""Point a Lambda function at the freshly uploaded archive.

Direct code swap: Publish=False (no new version) and DryRun=False. The
architecture passed must agree with the zip entry name chosen by the
packager; both derive from the same Architecture value.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from lambdapush.deploy.types import UpdateResult
from lambdapush.errors import UpdateError
from lambdapush.target.types import Architecture

logger = logging.getLogger(__name__)


def update_function_code(
    lambda_client,
    function_name: str,
    bucket: str,
    key: str,
    architecture: Architecture = Architecture.X86_64,
) -> UpdateResult:
    """Call UpdateFunctionCode for function_name with s3://bucket/key.

    Raises UpdateError on any Lambda or transport failure.
    """
    logger.info(
        "Updating function %s -> s3://%s/%s (%s)",
        function_name, bucket, key, architecture.lambda_name,
    )

    try:
        response = lambda_client.update_function_code(
            FunctionName=function_name,
            S3Bucket=bucket,
            S3Key=key,
            Publish=False,
            DryRun=False,
            Architectures=[architecture.lambda_name],
        )
    except ClientError as exc:
        error = exc.response.get("Error", {})
        raise UpdateError(
            f"UpdateFunctionCode {function_name} failed: "
            f"{error.get('Code', 'Unknown')}: {error.get('Message', str(exc))}",
            exc,
        ) from exc
    except BotoCoreError as exc:
        raise UpdateError(f"UpdateFunctionCode {function_name} failed: {exc}", exc) from exc

    result = UpdateResult.from_response(function_name, architecture.lambda_name, response)
    logger.info(
        "Function %s updated (sha256=%s, status=%s)",
        result.function_name, result.code_sha256, result.last_update_status,
    )
    return result
