"""Unit test configuration - isolate tests from the caller's environment"""

import os

import pytest

from learn_search.config import ENV_FIELDS


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove learn-search variables from the environment.

    Settings are read from os.environ; a developer's shell or .env file must
    not leak into unit tests.
    """
    for variable in ENV_FIELDS:
        monkeypatch.delenv(variable, raising=False)
    yield
    # load_dotenv() writes os.environ directly, bypassing monkeypatch
    for variable in ENV_FIELDS:
        os.environ.pop(variable, None)
