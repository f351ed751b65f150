"""Category label normalization."""

import re
from typing import Any

# Leading word char, any capital, any word-initial char, or a whitespace run
_CAMEL_BOUNDARY = re.compile(r"(?:^\w|[A-Z]|\b\w|\s+)", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def _recase(match: re.Match[str]) -> str:
    token = match.group(0)
    return token.lower() if match.start() == 0 else token.upper()


def canonicalize(raw_label: Any) -> str:
    """Derive the canonical category key from a free-form label.

    The first character is lower-cased and every following word start is
    upper-cased, then whitespace and anything that is not an ASCII letter or
    digit is dropped:

        "Upper Body!"  -> "upperBody"
        "lower-body"   -> "lowerBody"
        "Hat"          -> "hat"

    The transformation is lossy. Labels that differ only in punctuation
    (``"Upper Body"`` and ``"Upper-Body!"``) collapse to the same key.
    """
    if raw_label is None:
        return ""

    recased = _CAMEL_BOUNDARY.sub(_recase, str(raw_label))
    compacted = _WHITESPACE.sub("", recased)
    return _NON_ALPHANUMERIC.sub("", compacted)
