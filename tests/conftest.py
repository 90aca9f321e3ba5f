import pytest

from funckit.config import get_config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    previous = get_config()
    yield
    set_config(previous)


@pytest.fixture
def increment():
    return lambda x: x + 1


@pytest.fixture
def square():
    return lambda x: x * x
