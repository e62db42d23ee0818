import pytest

from sprig.builtin.prelude import create
from sprig.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh environment with the prelude loaded."""
    return create()


@pytest.fixture
def interp():
    """Fresh session with `if` as a lazy special form."""
    return Interpreter(eager_if=False)


@pytest.fixture
def eager_interp():
    """Fresh session with `if` as the eager builtin."""
    return Interpreter(eager_if=True)
