"""Resolve a DeploymentTarget from explicit parameters, settings and .pushrc.json.

Precedence, highest first:
  name, bucket — explicit parameter, then .pushrc.json
  region       — explicit parameter, then AWS_DEFAULT_REGION, then .pushrc.json
  arm          — ARM if either the explicit flag or .pushrc.json says so

This is the only place the process environment is consulted. The result is
an immutable DeploymentTarget handed to every later stage.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from lambdapush.core.config import Settings, get_settings
from lambdapush.errors import ConfigurationError
from lambdapush.target.types import RC_FILENAME, Architecture, DeploymentTarget, RcConfig

logger = logging.getLogger(__name__)


def _resolve_source_dir(path: Optional[str]) -> Path:
    """Return the absolute source directory, failing fast if it is missing."""
    resolved = Path(path or ".").expanduser().resolve()
    if not resolved.exists():
        raise ConfigurationError(f"Function path {resolved} does not exist")
    if not resolved.is_dir():
        raise ConfigurationError(f"Function path {resolved} is not a directory")
    return resolved


def load_rc_file(source_dir: Path) -> Optional[RcConfig]:
    """Load .pushrc.json from the source directory, if present.

    Returns None when the file does not exist. Malformed JSON or values of
    the wrong type raise ConfigurationError.
    """
    rc_path = Path(source_dir) / RC_FILENAME
    if not rc_path.is_file():
        logger.info("No rc file found at %s", rc_path)
        return None

    try:
        payload = json.loads(rc_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {rc_path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"{rc_path} must contain a JSON object")

    try:
        rc = RcConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid {rc_path}: {exc}") from exc

    logger.info("Loaded rc file %s", rc_path)
    return rc


def _first(*values: Optional[str]) -> str:
    for value in values:
        if value:
            return value
    return ""


def resolve_target(
    path: Optional[str] = None,
    name: Optional[str] = None,
    bucket: Optional[str] = None,
    region: Optional[str] = None,
    arm: bool = False,
    settings: Optional[Settings] = None,
) -> DeploymentTarget:
    """Merge explicit parameters with settings and .pushrc.json.

    Raises ConfigurationError before any build work starts when the source
    directory is missing or a required value (name, region, bucket) cannot
    be resolved.
    """
    settings = settings or get_settings()
    source_dir = _resolve_source_dir(path)
    rc = load_rc_file(source_dir) or RcConfig()

    function_name = _first(name, rc.name)
    resolved_bucket = _first(bucket, rc.bucket)
    resolved_region = _first(region, settings.aws_default_region, rc.region)
    architecture = Architecture.from_flag(arm or rc.arm)

    if not function_name:
        raise ConfigurationError("Function name required")
    if not resolved_region:
        raise ConfigurationError("AWS region required")
    if not resolved_bucket:
        raise ConfigurationError("S3 bucket required")

    target = DeploymentTarget(
        source_dir=source_dir,
        function_name=function_name,
        bucket=resolved_bucket,
        region=resolved_region,
        architecture=architecture,
    )
    logger.debug("Resolved deployment target: %s", target.to_dict())
    return target
