"""AWS access: session/client creation and the Lambda code update.

Public API:
    update_function_code(lambda_client, function_name, bucket, key, architecture) -> UpdateResult
    create_session(region) -> boto3.session.Session
    AwsClients
"""

from lambdapush.deploy.session import AwsClients, create_session
from lambdapush.deploy.types import UpdateResult
from lambdapush.deploy.updater import update_function_code

__all__ = [
    "update_function_code",
    "create_session",
    "AwsClients",
    "UpdateResult",
]
