"""Deployment target resolution.

Public API:
    resolve_target(path, name, bucket, region, arm, settings) -> DeploymentTarget
    load_rc_file(source_dir) -> Optional[RcConfig]
    Architecture, DeploymentTarget
"""

from lambdapush.target.resolver import load_rc_file, resolve_target
from lambdapush.target.types import (
    ARTIFACT_NAME,
    RC_FILENAME,
    Architecture,
    DeploymentTarget,
    RcConfig,
)

__all__ = [
    "resolve_target",
    "load_rc_file",
    "Architecture",
    "DeploymentTarget",
    "RcConfig",
    "ARTIFACT_NAME",
    "RC_FILENAME",
]
