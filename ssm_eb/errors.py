"""
Exceptions raised by ssm-eb.

Every failure aborts the run; the CLI turns these into a one-line diagnostic.
"""

from typing import Optional


class SsmEbError(Exception):
    """Base class for all ssm-eb errors."""


class ConfigError(SsmEbError):
    """The parameters file could not be loaded."""


class ConfigFileError(ConfigError):
    """The parameters file could not be read."""


class ConfigParseError(ConfigError):
    """The parameters file is not valid YAML or has the wrong structure."""


class RemoteError(SsmEbError):
    """
    A call against the parameter store failed.

    Attributes:
        path: Parameter path the call was made for
        code: AWS error code when one is available (e.g. ParameterNotFound)
        cause: The underlying botocore exception
    """

    def __init__(self, path: str, cause: Exception, code: Optional[str] = None):
        self.path = path
        self.code = code
        self.cause = cause
        if path:
            super().__init__(f"parameter `{path}`: {cause}")
        else:
            super().__init__(str(cause))


class StreamError(SsmEbError):
    """Reading interactive input or writing output failed."""


class UsageError(SsmEbError):
    """The tool was invoked with invalid arguments."""
