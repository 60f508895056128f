"""
Input schema for the ssm-eb parameters file.

This module defines the expected structure of the file listing the
component and external parameters. Field presence is deliberately not
enforced: a parameter with no path fails when the store is queried.
"""

import jsonschema
from typing import Any


# Scalars only; nested mappings and lists are rejected
SCALAR = {"not": {"type": ["object", "array"]}}

PARAMETER_SCHEMA = {
    "type": "object",
    "properties": {
        "option_name": {
            **SCALAR,
            "description": "Name of the environment variable in the output"
        },
        "description": {
            **SCALAR,
            "description": "Description stored alongside the parameter"
        },
        "path": {
            **SCALAR,
            "description": "Key of the parameter in the parameter store"
        },
        "value": {
            **SCALAR,
            "description": "Literal value used in set mode instead of prompting"
        }
    }
}

INPUT_SCHEMA = {
    "type": ["object", "null"],
    "properties": {
        "component": {
            "type": ["array", "null"],
            "items": PARAMETER_SCHEMA,
            "description": "Parameters owned by this application"
        },
        "external": {
            "type": ["array", "null"],
            "items": PARAMETER_SCHEMA,
            "description": "Parameters owned elsewhere; read-only"
        }
    }
}


def validate_input(data: Any) -> bool:
    """
    Validate a parsed parameters file against the schema.

    Args:
        data: Parsed YAML document to validate

    Returns:
        True if valid, raises jsonschema.ValidationError otherwise
    """
    jsonschema.validate(instance=data, schema=INPUT_SCHEMA)
    return True
