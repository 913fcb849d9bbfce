import pytest

from kappa.builtins import register
from kappa.interpreter import Interpreter
from kappa.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter session."""
    return Interpreter()
