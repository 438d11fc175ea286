"""Pytest fixtures for Utils Helper tests."""
import pytest


@pytest.fixture
def multiline_text():
    """Text with several newlines, including consecutive ones."""
    return "first line\nsecond line\n\nfourth line\n"


@pytest.fixture
def quoted_text():
    """Text with several single quotes."""
    return "it's Tom's 'quoted' text"


@pytest.fixture
def sample_items():
    """Non-empty list of mixed values."""
    return ["alpha", 2, None, {"key": "value"}]
