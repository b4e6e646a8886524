"""Pytest configuration and shared corpus fixtures"""

import sys
from pathlib import Path
import pytest

# Add project root to path for learn_search imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Add tests directory to path for corpus_factory import
tests_dir = Path(__file__).parent
sys.path.insert(0, str(tests_dir))

from corpus_factory import write_module


@pytest.fixture
def corpus_root(tmp_path):
    """Empty corpus root directory"""
    root = tmp_path / "learn-pr"
    root.mkdir()
    return root


@pytest.fixture
def basics_corpus(corpus_root):
    """
    Two-module corpus used across scanner/ranker tests.

    intro (title "Intro", 2 units): 3 x "error", 1 x "warn"
    advanced (title "Advanced", 1 unit): 0 x "error", 2 x "warn"
    """
    write_module(
        corpus_root,
        "intro",
        {
            "1-introduction": "An error happens.\nAnother error and an error again.\n",
            "2-summary": "Nothing to see.\nA warn line.\n",
        },
        title="Intro",
    )
    write_module(
        corpus_root,
        "advanced",
        {
            "1-deep-dive": "warn first\nthen warn again\n",
        },
        title="Advanced",
    )
    return corpus_root
