"""
Global pytest configuration and fixtures.

Provides small lexicon and tweet corpora on disk, and keeps logging quiet
during test runs.
"""

import pytest


@pytest.fixture
def write_file(tmp_path):
    """
    Factory fixture writing UTF-8 text files under tmp_path.

    Usage: write_file("lexicons/a.txt", "good,1.0\\nbad,-1.0\\n")
    """
    def _write(relative_path, content):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def lexicon_dir(write_file, tmp_path):
    """Directory with two lexicon files and one file of an unrecognized type."""
    write_file("lexicons/positive.txt", "good,1.0\nhappy,0.5\nok,1.0\n")
    write_file("lexicons/negative.txt", "bad,-1.0\nsad,-0.5\nok,1.0\n")
    write_file("lexicons/notes.md", "ignored,100.0\n")
    return tmp_path / "lexicons"


@pytest.fixture
def tweet_lines():
    """Sample tweets covering each sentiment label."""
    return [
        "What a good day, so happy!",
        "This is bad and sad",
        "Nothing to see here",
        "good bad",
    ]


# Performance optimization: disable logging during tests unless explicitly enabled
@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt

    # Set higher log level to reduce output during tests
    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)

    yield

    # Restore normal logging after tests
    logging.getLogger().setLevel(logging.INFO)
