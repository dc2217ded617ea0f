"""Best-effort removal of active content from chapter HTML.

Pattern-based, not a security-grade sanitizer: it strips ``<script>`` and
``<noscript>`` blocks and inline ``on*="..."`` handlers and nothing else.
Consumers that render untrusted HTML must run a real sanitizer on top.
"""

from __future__ import annotations

import re

_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"\s+on\w+=\"[^\"]*\"", re.IGNORECASE)
_NOSCRIPT_RE = re.compile(r"<noscript>.*?</noscript>", re.IGNORECASE | re.DOTALL)


def _strip_once(content: str) -> str:
    content = _SCRIPT_RE.sub("", content)
    content = _EVENT_HANDLER_RE.sub("", content)
    return _NOSCRIPT_RE.sub("", content)


def sanitize_content(content: str) -> str:
    # Removing one construct can splice its neighbours into another, so the
    # passes repeat until nothing changes. Every pass that changes the text
    # shortens it, which bounds the loop.
    while True:
        stripped = _strip_once(content)
        if stripped == content:
            return content
        content = stripped
