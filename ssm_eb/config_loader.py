"""
Loading of the parameters file.

The file lists component parameters (owned, settable) and external
parameters (read-only), each with an option name and a store path.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import jsonschema
from ruamel.yaml.error import YAMLError

from .common import as_string, get_logger, source_text_yaml
from .config_schema import validate_input
from .errors import ConfigFileError, ConfigParseError

logger = get_logger(__name__)


@dataclass
class ParameterSpec:
    """A single parameter as declared in the parameters file."""

    name: str = ""
    description: str = ""
    path: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParameterSpec':
        return cls(
            name=as_string(data.get('option_name')),
            description=as_string(data.get('description')),
            path=as_string(data.get('path')),
            value=as_string(data.get('value')),
        )


@dataclass
class ParameterSet:
    """Component and external parameters, in file order."""

    component: List[ParameterSpec] = field(default_factory=list)
    external: List[ParameterSpec] = field(default_factory=list)

    def all(self) -> List[ParameterSpec]:
        """Return component parameters followed by external ones."""
        return self.component + self.external


def prefix_path(path: str, environment: str) -> str:
    """
    Prepend the environment segment to a parameter path.

    Args:
        path: Original parameter path
        environment: Environment name; empty leaves the path untouched

    Returns:
        The rewritten path
    """
    if not environment:
        return path
    return "/" + environment + path


def load_parameters(filename: str, environment: Optional[str] = "") -> ParameterSet:
    """
    Read the parameters file and apply the environment prefix.

    Args:
        filename: Path to the YAML parameters file
        environment: Optional environment name used as path prefix

    Returns:
        ParameterSet holding the parsed parameters

    Raises:
        ConfigFileError: if the file can't be read
        ConfigParseError: if the file isn't valid YAML of the expected shape
    """
    try:
        with open(filename, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise ConfigFileError(str(e)) from e

    try:
        data = source_text_yaml().load(content)
    except (YAMLError, UnicodeDecodeError) as e:
        raise ConfigParseError(str(e)) from e

    try:
        validate_input(data)
    except jsonschema.ValidationError as e:
        raise ConfigParseError(e.message) from e

    data = data or {}
    parameters = ParameterSet(
        component=[ParameterSpec.from_dict(p) for p in data.get('component') or []],
        external=[ParameterSpec.from_dict(p) for p in data.get('external') or []],
    )

    if environment:
        for par in parameters.all():
            par.path = prefix_path(par.path, environment)

    logger.debug(
        "Loaded %d component and %d external parameters from %s",
        len(parameters.component), len(parameters.external), filename
    )
    return parameters
