"""Shared fixtures for integration tests

Integration tests run the real CLI (learn_search.main.main) end to end:
- keyword file on disk
- corpus of modules under a temporary LEARN_REPO_ROOT
- report captured from stdout, diagnostics from stderr

NO MOCKS - the whole pipeline (load, discover, scan, rank, report) runs.

To run integration tests:
    pytest tests/integration/

To skip integration tests explicitly:
    pytest tests/unit/                    # Only unit tests
    pytest -m 'not integration'           # Marked with @pytest.mark.integration
"""

import logging
import os

import pytest

from learn_search.config import ENV_FIELDS


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    """
    Run each test from an empty working directory with a clean environment.

    The CLI reads .env files from the working directory and replaces the
    root logging handlers; both are restored afterwards.
    """
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for variable in ENV_FIELDS:
        monkeypatch.delenv(variable, raising=False)

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level

    yield workdir

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for variable in ENV_FIELDS:
        os.environ.pop(variable, None)
