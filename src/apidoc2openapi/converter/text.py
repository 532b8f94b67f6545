"""Text helpers shared by the converter."""

import re

TAG_RE = re.compile(r"<[^>]*>")
WHITESPACE_RE = re.compile(r"\s+")
STATUS_CODE_RE = re.compile(r"\b(\d{3})\b")
PATH_PARAM_RE = re.compile(r":([a-zA-Z0-9_]+)")


def strip_html(text: str | None) -> str:
    """Drop markup tags and collapse whitespace in apiDoc's HTML descriptions."""
    if not text:
        return ""
    text = TAG_RE.sub(" ", text)
    text = text.replace("&quot;", '"').replace("&amp;", "&")
    return WHITESPACE_RE.sub(" ", text).strip()


def extract_status_code(label: str | None, fallback: str | None) -> str | None:
    """Return the first 3-digit code in a group label like "Error 404", else ``fallback``."""
    if not label:
        return fallback
    match = STATUS_CODE_RE.search(str(label))
    return match.group(1) if match else fallback


def normalize_path(url: str) -> str:
    """Rewrite ``/users/:id`` to ``/users/{id}``."""
    return PATH_PARAM_RE.sub(r"{\1}", url)
