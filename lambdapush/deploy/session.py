"""boto3 session seam.

Region is always passed explicitly from the resolved DeploymentTarget;
credentials come from boto3's default chain (env, profile, SSO, instance
role). Tests inject an AwsClients with stubbed clients instead.
"""

import logging
from dataclasses import dataclass
from typing import Any

import boto3

from lambdapush.target.types import DeploymentTarget

logger = logging.getLogger(__name__)


def create_session(region: str) -> boto3.session.Session:
    return boto3.session.Session(region_name=region)


@dataclass
class AwsClients:
    """The two service clients a run needs, built from one session."""

    s3: Any
    lambda_: Any

    @classmethod
    def from_target(cls, target: DeploymentTarget) -> "AwsClients":
        session = create_session(target.region)
        logger.debug("Created boto3 session for region %s", target.region)
        return cls(
            s3=session.client("s3"),
            lambda_=session.client("lambda"),
        )
