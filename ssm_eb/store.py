"""
Thin wrapper over the AWS Systems Manager Parameter Store.

Only two capabilities are exposed: fetching a value by path and storing a
plain string value, always overwriting. No retries are attempted; any
failure surfaces as a RemoteError.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .common import get_logger
from .errors import RemoteError

logger = get_logger(__name__)

PARAMETER_TYPE = "String"


def _remote_error(path: str, error: Exception) -> RemoteError:
    code = None
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code")
    return RemoteError(path, error, code)


class ParameterStore:
    """Fetch and store parameters through an SSM client."""

    def __init__(self, client):
        """
        Initialize the store.

        Args:
            client: A boto3 SSM client (or anything with the same
                get_parameter/put_parameter methods)
        """
        self.client = client

    @classmethod
    def from_session(cls, profile: Optional[str] = None,
                     region: Optional[str] = None) -> 'ParameterStore':
        """
        Build a store from the ambient AWS configuration.

        Args:
            profile: Shared config profile name; boto3 resolution when None
            region: Region name; boto3 resolution when None

        Returns:
            A ParameterStore backed by a new SSM client
        """
        try:
            session = boto3.Session(profile_name=profile, region_name=region)
            return cls(session.client("ssm"))
        except BotoCoreError as e:
            raise RemoteError("", e) from e

    def fetch(self, path: str) -> str:
        """
        Get the value stored at a path.

        Args:
            path: Parameter path

        Returns:
            The parameter value

        Raises:
            RemoteError: if the parameter is missing, access is denied, or
                the call fails for any other reason
        """
        logger.debug("get_parameter %s", path)
        try:
            response = self.client.get_parameter(Name=path)
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(path, e) from e
        return response["Parameter"]["Value"]

    def store(self, path: str, description: str, value: str) -> Optional[int]:
        """
        Put a plain string value at a path, overwriting any existing value.

        Args:
            path: Parameter path
            description: Parameter description; omitted from the call when empty
            value: Value to store

        Returns:
            The parameter version reported by the store

        Raises:
            RemoteError: if the call fails
        """
        request = {
            "Name": path,
            "Value": value,
            "Type": PARAMETER_TYPE,
            "Overwrite": True,
        }
        if description:
            request["Description"] = description

        logger.debug("put_parameter %s", path)
        try:
            response = self.client.put_parameter(**request)
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(path, e) from e

        version = response.get("Version")
        logger.debug("Stored %s at version %s", path, version)
        return version
