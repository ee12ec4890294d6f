import pytest


@pytest.fixture(autouse=True)
def config_logger():
    from hashset.hashset_log import configure_logger

    with configure_logger("test", 2, None):
        yield


@pytest.fixture
def digits():
    from hashset import HashSet

    return HashSet(*range(10))
