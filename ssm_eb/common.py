"""
Common utilities for ssm-eb.

Shared functionality between the loader, store, executor and CLI modules.
"""

import logging
import os
from typing import Any, Dict, Optional

import ruamel.yaml
from ruamel.yaml.constructor import BaseConstructor

BANNER_RULE = "-" * 41
DEFAULT_LOG_LEVEL = "WARNING"


class SourceTextConstructor(BaseConstructor):
    """Keep every scalar as written; only null becomes None."""

    def construct_yaml_null(self, node: Any) -> None:
        self.construct_scalar(node)
        return None


SourceTextConstructor.add_constructor(
    "tag:yaml.org,2002:null", SourceTextConstructor.construct_yaml_null
)


def source_text_yaml() -> ruamel.yaml.YAML:
    """
    Return a YAML loader producing plain dicts, lists and strings.

    Numbers, booleans and dates are not resolved, so `01234` loads as
    "01234". Plain `~`, `null` and empty values load as None.
    """
    yaml = ruamel.yaml.YAML(typ="base", pure=True)
    yaml.Constructor = SourceTextConstructor
    return yaml


def as_string(value: Any) -> str:
    """Return a loaded scalar as a string, with None as the empty string."""
    if value is None:
        return ""
    return str(value)


def log_level(name: Optional[str]) -> str:
    """
    Normalize a level name, falling back to WARNING when it is unknown.

    Args:
        name: Level name such as "debug" or "INFO"

    Returns:
        An upper-case level name logging accepts
    """
    level = (name or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger configured from the LOG_LEVEL environment variable.

    Args:
        name: Logger name, usually __name__

    Returns:
        The configured logger
    """
    level = log_level(os.getenv("LOG_LEVEL"))
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    return logging.getLogger(name)


def format_settings_banner(settings: Dict[str, Optional[str]]) -> str:
    """
    Format the effective run settings as a framed block.

    Args:
        settings: Ordered mapping of setting label to value

    Returns:
        Multi-line banner string
    """
    width = max((len(label) for label in settings), default=0) + 2
    lines = [BANNER_RULE]
    for label, value in settings.items():
        lines.append(f"{(label + ':').ljust(width)} {value or ''}".rstrip())
    lines.append(BANNER_RULE)
    return "\n".join(lines)
