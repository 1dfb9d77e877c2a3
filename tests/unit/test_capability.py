"""Unit tests for the editing-surface capability probe."""

import pytest

from resume_form.components.capability import needs_plain_text_fallback
from resume_form.core.config import FormConfig

FIREFOX = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
SAFARI = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_4) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Safari/605.1.15"
)
CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
)


@pytest.mark.parametrize(
    "user_agent, expected",
    [
        (FIREFOX, True),
        (SAFARI, True),
        (CHROME, False),
        ("", False),
    ],
)
def test_needs_plain_text_fallback(user_agent, expected):
    """Test that Firefox and non-Chrome Safari need the fallback."""
    assert needs_plain_text_fallback(user_agent) is expected


def test_needs_plain_text_fallback_handles_none():
    """Test that a missing user agent means no fallback."""
    assert needs_plain_text_fallback(None) is False


def test_needs_plain_text_fallback_custom_engines():
    """Test that the engine lists come from config."""
    config = FormConfig(fallback_engines=("Edg",), fallback_excluded_engines=())
    assert needs_plain_text_fallback(CHROME, config) is False
    assert needs_plain_text_fallback(CHROME + " Edg/126.0", config) is True
