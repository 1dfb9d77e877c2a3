"""Capability probe for bullet list editing surfaces.

Some browser editing engines report content-editable text unreliably (a
trailing space comes back as a line break in Firefox). Those hosts get the
plain-text fallback codec. The probe runs once per editing widget.
"""

from __future__ import annotations

import logging

from ..core.config import FormConfig

logger = logging.getLogger(__name__)


def needs_plain_text_fallback(user_agent: str, config: FormConfig | None = None) -> bool:
    """Return True if the host's editing engine needs the plain-text codec.

    A user agent matches when it carries a fallback token and none of the
    excluded tokens: Chrome also advertises itself as Safari.
    """
    config = config or FormConfig()
    user_agent = user_agent or ""
    matched = any(token in user_agent for token in config.fallback_engines)
    excluded = any(token in user_agent for token in config.fallback_excluded_engines)
    needs_fallback = matched and not excluded
    logger.info(f"Capability probe: plain-text fallback={'on' if needs_fallback else 'off'}")
    return needs_fallback
