"""Command-line entry point.

    lambdapush [--path DIR] [--name NAME] [--bucket BUCKET] [--region REGION]
               [--arm] [--wait] [--verbose]

Values not given on the command line are taken from AWS_DEFAULT_REGION and
<path>/.pushrc.json. Progress goes to stdout as ">> ..." lines; logs go to
stderr. Exit status is 0 on success and 1 on any failure.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import structlog
from pydantic import ValidationError

from lambdapush.core.config import get_settings
from lambdapush.core.logging import configure_structlog
from lambdapush.errors import ConfigurationError, PushError
from lambdapush.pipeline.orchestrator import run_pipeline
from lambdapush.pipeline.types import PipelineStage
from lambdapush.target.resolver import resolve_target
from lambdapush.target.types import DeploymentTarget

PROG = "lambdapush"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Cross-compile a Go function, zip it, push it to S3 and update the Lambda code.",
    )
    parser.add_argument("--path", default=".", help="Function path (default: current directory)")
    parser.add_argument("--name", default="", help="Function name")
    parser.add_argument("--bucket", default="", help="S3 bucket name")
    parser.add_argument("--region", default="", help="AWS region (default: AWS_DEFAULT_REGION)")
    parser.add_argument(
        "--arm",
        action="store_true",
        help="Build for AWS Graviton2 arm64 (zip entry 'bootstrap')",
    )
    parser.add_argument(
        "--wait",
        action="store_true",
        help="Wait for the uploaded object to be visible before updating the function",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    return parser


def _print_progress(stage: PipelineStage, message: str) -> None:
    print(f">> {message}", flush=True)


def _print_target(target: DeploymentTarget) -> None:
    print(">> Run lambdapush for function", target.source_dir)
    print(">> Function name :", target.function_name)
    print(">> Arm build (AWS Graviton2) :", "Yes" if target.architecture.is_arm else "No")
    print(">> AWS Region :", target.region)
    print(">> S3 Bucket :", target.bucket)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Invalid environment settings: {exc}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if args.wait:
        settings = settings.model_copy(update={"verify_upload": True})
    configure_structlog(debug=args.verbose or settings.debug)
    log = structlog.get_logger(PROG)

    try:
        target = resolve_target(
            path=args.path,
            name=args.name,
            bucket=args.bucket,
            region=args.region,
            arm=args.arm,
            settings=settings,
        )
    except ConfigurationError as exc:
        print(str(exc), file=sys.stderr)
        parser.print_usage(sys.stderr)
        log.error("configuration_error", stage=PipelineStage.RESOLVING.value, error=str(exc))
        return 1

    _print_target(target)
    result = run_pipeline(target, settings=settings, reporter=_print_progress)

    if isinstance(result.error, PushError):
        print(str(result.error), file=sys.stderr)
    elif result.error is not None:
        print(f"{type(result.error).__name__}: {result.error}", file=sys.stderr)
    if result.cleanup_error is not None:
        print(str(result.cleanup_error), file=sys.stderr)

    log.info("pipeline_finished", **result.to_dict())
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
