"""
Rendering of Elastic Beanstalk option settings.

The document is a single mapping whose `option_settings` key holds the
options in the order they were resolved.
"""

import sys
from dataclasses import dataclass, field
from io import StringIO
from typing import List, Optional

import ruamel.yaml
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from .common import as_string, source_text_yaml
from .errors import StreamError

OPTION_SETTINGS_KEY = 'option_settings'


@dataclass
class OutputOption:
    """One resolved option: its declared name and fetched value."""

    name: str
    value: str


@dataclass
class OutputDocument:
    """Ordered list of resolved options."""

    options: List[OutputOption] = field(default_factory=list)

    def append(self, name: str, value: str) -> None:
        self.options.append(OutputOption(name=name, value=value))

    def pairs(self) -> List[tuple]:
        return [(option.name, option.value) for option in self.options]

    def __len__(self) -> int:
        return len(self.options)


def _make_yaml() -> ruamel.yaml.YAML:
    yaml = ruamel.yaml.YAML()
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def dump_option_settings(document: OutputDocument) -> str:
    """
    Serialize the document to YAML.

    Args:
        document: Resolved options

    Returns:
        YAML text ending with a newline
    """
    options = CommentedSeq()
    for option in document.options:
        entry = CommentedMap()
        entry['option_name'] = option.name
        entry['value'] = option.value
        options.append(entry)

    data = CommentedMap()
    data[OPTION_SETTINGS_KEY] = options

    stream = StringIO()
    _make_yaml().dump(data, stream)
    return stream.getvalue()


def load_option_settings(text: str) -> OutputDocument:
    """
    Parse YAML produced by dump_option_settings.

    Args:
        text: YAML text

    Returns:
        OutputDocument with the options in file order
    """
    data = source_text_yaml().load(text) or {}
    document = OutputDocument()
    for entry in data.get(OPTION_SETTINGS_KEY) or []:
        document.append(as_string(entry.get('option_name')), as_string(entry.get('value')))
    return document


def write_output(text: str, destination: Optional[str] = None) -> int:
    """
    Print the text, or write it to a file.

    The file is truncated or created; a failure mid-write may leave it
    partially written.

    Args:
        text: Serialized document
        destination: File path; stdout when empty or None

    Returns:
        Number of bytes written

    Raises:
        StreamError: if the file can't be created, written or closed
    """
    data = text.encode('utf-8')
    if not destination:
        print(text)
        return len(data)

    try:
        with open(destination, 'wb') as f:
            written = f.write(data)
    except OSError as e:
        raise StreamError(f"Error writing to file `{destination}`: {e}") from e

    print(f"{written} bytes written successfully to `{destination}`", file=sys.stderr)
    return written
