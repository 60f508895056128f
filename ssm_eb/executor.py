"""
Get and set pipelines.

Both run sequentially over the parameters and stop at the first failure.
Set mode has no rollback: parameters stored before a failure stay stored.
"""

import sys
from typing import Optional, TextIO

from .common import get_logger
from .config_loader import ParameterSet, ParameterSpec
from .errors import StreamError, UsageError
from .output import OutputDocument, dump_option_settings, write_output

logger = get_logger(__name__)

MODES = ('get', 'set')


def get_option_settings(store, parameters: ParameterSet) -> OutputDocument:
    """
    Fetch every parameter and build the option settings document.

    Component parameters come first, then external ones, each in file order.

    Args:
        store: Object providing fetch(path) -> str
        parameters: Parameters to fetch

    Returns:
        OutputDocument with one option per parameter

    Raises:
        RemoteError: on the first failed fetch; nothing is returned
    """
    document = OutputDocument()
    for par in parameters.all():
        print(f"* Getting `{par.name}` from path `{par.path}`... ", end="", file=sys.stderr)
        value = store.fetch(par.path)
        document.append(par.name, value)
        print("OK", file=sys.stderr)
    return document


def read_value(par: ParameterSpec, stdin: TextIO, stdout: TextIO) -> str:
    """
    Prompt for a parameter value and read one line.

    Only the trailing newline is removed; other whitespace is kept.

    Raises:
        StreamError: if input ends before a full line is read
    """
    stdout.write(f"* Input value for `{par.path}`: ")
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise StreamError(f"Error reading value for `{par.path}`: {e}") from e
    if not line.endswith("\n"):
        raise StreamError(f"Error reading value for `{par.path}`: unexpected end of input")
    return line[:-1]


def set_parameters(store, parameters: ParameterSet,
                   stdin: Optional[TextIO] = None,
                   stdout: Optional[TextIO] = None) -> int:
    """
    Store every component parameter.

    External parameters are never written. A literal value from the file is
    used when present; otherwise the value is read interactively.

    Args:
        store: Object providing store(path, description, value)
        parameters: Parameters to store
        stdin: Stream to read prompted values from (default sys.stdin)
        stdout: Stream to write prompts to (default sys.stdout)

    Returns:
        Number of parameters stored

    Raises:
        RemoteError: on the first failed store
        StreamError: if a prompted value can't be read
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stored = 0
    for par in parameters.component:
        if par.value:
            value = par.value
            stdout.write(f"* Setting value for `{par.path}`...\n")
        else:
            value = read_value(par, stdin, stdout)

        version = store.store(par.path, par.description, value)
        logger.debug("Set %s (version %s)", par.path, version)
        stored += 1

    if parameters.external:
        logger.debug("Skipped %d external parameters", len(parameters.external))
    return stored


def run(mode: str, store, parameters: ParameterSet,
        output: Optional[str] = None) -> Optional[OutputDocument]:
    """
    Run the pipeline selected by mode.

    Args:
        mode: 'get' or 'set'
        store: Parameter store capability object
        parameters: Loaded parameters
        output: Destination file for get mode; stdout when empty

    Returns:
        The OutputDocument in get mode, None in set mode

    Raises:
        UsageError: if mode is not recognised
    """
    if mode == 'get':
        document = get_option_settings(store, parameters)
        write_output(dump_option_settings(document), output)
        return document
    elif mode == 'set':
        set_parameters(store, parameters)
        return None
    else:
        raise UsageError(f"Invalid mode: {mode}")
