"""Test configuration and setup for pytest.

Puts the project root and the test directory on sys.path so tests can import
the application modules and the shared fakes without path manipulation.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

test_dir = Path(__file__).parent
sys.path.insert(0, str(test_dir))

from base_models import Credential  # noqa: E402
from fakes import FakeTransport  # noqa: E402


@pytest.fixture
def credential():
    return Credential(token="ghp_test_token", endpoint="https://api.github.com")


@pytest.fixture
def fake_transport():
    return FakeTransport()
