"""
Shared pytest fixtures and configuration for ssm-eb tests.

The parameter store is replaced by an in-memory fake so nothing here
needs AWS credentials.
"""

import pytest
import tempfile
import shutil
import os

from ssm_eb.config_loader import ParameterSet, ParameterSpec
from ssm_eb.errors import RemoteError


class FakeParameterStore:
    """In-memory stand-in providing the fetch/store capability pair."""

    def __init__(self, values=None, fail_on=None):
        self.values = dict(values or {})
        self.fail_on = set(fail_on or [])
        self.fetched = []
        self.stored = []

    def fetch(self, path):
        self.fetched.append(path)
        if path in self.fail_on or path not in self.values:
            raise RemoteError(path, Exception("ParameterNotFound"), "ParameterNotFound")
        return self.values[path]

    def store(self, path, description, value):
        if path in self.fail_on:
            raise RemoteError(path, Exception("AccessDenied"), "AccessDeniedException")
        self.stored.append((path, description, value))
        self.values[path] = value
        return len(self.stored)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that's automatically cleaned up."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


SAMPLE_YAML_CONTENT = {
    'basic': """
component:
  - option_name: DB_HOST
    description: Database host
    path: /db/host
  - option_name: DB_PORT
    path: /db/port
    value: "5432"
external:
  - option_name: QUEUE_URL
    path: /shared/queue-url
""",

    'single': """
component:
  - option_name: DB_HOST
    path: /db/host
external: []
""",

    'missing_fields': """
component:
  - description: No name and no path
""",

    'scalars': """
component:
  - option_name: PORT
    path: /port
    value: 8080
  - option_name: DEBUG
    path: /debug
    value: true
  - option_name: EMPTY
    path: /empty
    value:
""",

    'wrong_shape': """
component:
  option_name: DB_HOST
  path: /db/host
""",

    'malformed': """
component:
  - option_name: DB_HOST
    path: [unclosed
""",
}


@pytest.fixture
def yaml_content():
    """Provide common YAML content for tests."""
    return SAMPLE_YAML_CONTENT


@pytest.fixture
def write_input(temp_dir):
    """Factory writing a parameters file into temp_dir and returning its path."""
    def _write(content, name="params.yaml"):
        path = os.path.join(temp_dir, name)
        with open(path, 'w') as f:
            f.write(content)
        return path
    return _write


@pytest.fixture
def parameter_set():
    """Three parameters: two component, one external."""
    return ParameterSet(
        component=[
            ParameterSpec(name="DB_HOST", description="Database host", path="/db/host"),
            ParameterSpec(name="DB_PORT", path="/db/port", value="5432"),
        ],
        external=[
            ParameterSpec(name="QUEUE_URL", path="/shared/queue-url"),
        ],
    )


@pytest.fixture
def fake_store():
    """Fake store holding values for every path in parameter_set."""
    return FakeParameterStore({
        "/db/host": "localhost",
        "/db/port": "5432",
        "/shared/queue-url": "https://sqs.example.com/queue",
    })
