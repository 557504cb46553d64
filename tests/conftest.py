import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cpmodel.dispatch import registry


@pytest.fixture(autouse=True)
def clear_registry():
    """Start and finish every test with an empty process-wide service registry."""
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def series():
    return [0.1, -0.3, 0.2, 5.1, 4.9, 5.3, 5.0, 0.0, -0.2, 0.1]
