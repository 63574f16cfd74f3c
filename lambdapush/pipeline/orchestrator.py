"""Pipeline orchestrator — builds and deploys one Lambda function.

Pipeline:
  1. compile_function()      — go build into <src>/main
  2. package_artifact()      — single-entry zip in memory
  3. upload_archive()        — PutObject <name>.zip into the bucket
  4. update_function_code()  — repoint the function at the new object
  5. remove_artifact()       — always, whatever happened above

Each stage runs only if the previous one succeeded. Nothing is retried and
nothing remote is rolled back: if the update fails, the uploaded object
stays in the bucket and the next run overwrites it.

When the update step fails, the local binary is removed immediately and
then again by the unconditional final cleanup. remove_artifact() is
idempotent so the second call is a no-op.
"""

import logging
from typing import Optional

from botocore.exceptions import BotoCoreError

from lambdapush.build.compiler import compile_function
from lambdapush.core.config import Settings, get_settings
from lambdapush.deploy.session import AwsClients
from lambdapush.deploy.updater import update_function_code
from lambdapush.errors import CleanupError, PushError, TransportError, UpdateError
from lambdapush.packaging.archive import package_artifact
from lambdapush.packaging.uploader import upload_archive
from lambdapush.pipeline.cleanup import remove_artifact
from lambdapush.pipeline.types import PipelineResult, PipelineStage, Reporter
from lambdapush.target.types import DeploymentTarget

logger = logging.getLogger(__name__)


def _log_reporter(stage: PipelineStage, message: str) -> None:
    logger.info("[%s] %s", stage.value, message)


def _create_clients(target: DeploymentTarget) -> AwsClients:
    try:
        return AwsClients.from_target(target)
    except BotoCoreError as exc:
        raise TransportError(f"Cannot create AWS clients for {target.region}: {exc}", exc) from exc


def _run_stages(
    target: DeploymentTarget,
    clients: Optional[AwsClients],
    settings: Settings,
    result: PipelineResult,
    report: Reporter,
) -> None:
    result.stage = PipelineStage.COMPILING
    report(result.stage, "Building target function ...")
    artifact = compile_function(
        target.source_dir,
        target.architecture,
        go_binary=settings.go_binary,
    )
    logger.info(
        "Compiled %s (%d bytes): %s",
        artifact.path, artifact.size, artifact.compile_result.to_dict(),
    )
    report(result.stage, "Build target function success")

    result.stage = PipelineStage.PACKAGING
    report(result.stage, "Zip generated binary ...")
    archive = package_artifact(artifact.path, target.architecture)
    result.archive_size = archive.size
    report(result.stage, f"Zip generated binary success ({archive.entry_name}, {archive.size} bytes)")

    result.stage = PipelineStage.UPLOADING
    report(result.stage, f"Push zip archive to s3 bucket {target.bucket} ...")
    if clients is None:
        clients = _create_clients(target)
    result.upload = upload_archive(
        clients.s3,
        target.bucket,
        target.object_key,
        archive,
        wait=settings.verify_upload,
    )
    report(result.stage, f"Push zip archive to s3 bucket {target.bucket} success")

    result.stage = PipelineStage.UPDATING_FUNCTION
    report(result.stage, "Update aws lambda function code ...")
    try:
        result.update = update_function_code(
            clients.lambda_,
            target.function_name,
            target.bucket,
            target.object_key,
            target.architecture,
        )
    except UpdateError:
        _early_cleanup(target)
        raise
    report(result.stage, "Update aws lambda function code success")


def _early_cleanup(target: DeploymentTarget) -> None:
    """Remove the binary right after a failed update, ahead of final cleanup."""
    try:
        remove_artifact(target.artifact_path)
    except CleanupError as exc:
        # Final cleanup retries and reports this.
        logger.warning("Early cleanup after update failure did not complete: %s", exc)


def _final_cleanup(target: DeploymentTarget, result: PipelineResult, report: Reporter) -> None:
    result.stage = PipelineStage.CLEANING_UP
    try:
        remove_artifact(target.artifact_path)
    except CleanupError as exc:
        if result.error is None:
            result.error = exc
            result.failed_stage = PipelineStage.CLEANING_UP
        else:
            result.cleanup_error = exc
        logger.error("Cleanup failed: %s", exc)
        return

    result.artifact_removed = True
    report(result.stage, "Removed generated binary")


def run_pipeline(
    target: DeploymentTarget,
    clients: Optional[AwsClients] = None,
    settings: Optional[Settings] = None,
    reporter: Optional[Reporter] = None,
) -> PipelineResult:
    """Run compile -> package -> upload -> update -> cleanup for target.

    Args:
        target: Resolved, immutable deployment parameters.
        clients: S3 and Lambda clients; created from target.region if omitted.
        settings: Toolchain and upload-verification settings.
        reporter: Called as reporter(stage, message) for progress lines.

    Returns:
        PipelineResult. Failures (PushError or any other Exception) are
        recorded on the result with the stage that failed, and exit_code
        is 1. The local binary is removed on every exit path.
    """
    settings = settings or get_settings()
    report = reporter or _log_reporter
    result = PipelineResult(target=target)

    logger.info("Pipeline starting for %s", target.to_dict())
    try:
        _run_stages(target, clients, settings, result, report)
    except PushError as exc:
        result.error = exc
        result.failed_stage = result.stage
        logger.error("Pipeline failed at %s: %s", result.stage.value, exc)
    except Exception as exc:
        result.error = exc
        result.failed_stage = result.stage
        logger.exception("Unexpected error at %s", result.stage.value)
    finally:
        # Runs on KeyboardInterrupt too, before it propagates.
        _final_cleanup(target, result, report)

    result.stage = PipelineStage.FAILED if result.error else PipelineStage.DONE
    if result.is_success:
        report(result.stage, "All done :)")
    return result
