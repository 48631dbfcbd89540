"""Field key generation for the builder."""

import re
from typing import Iterable

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_EDGE_UNDERSCORES = re.compile(r"^_+|_+$")
_BAD_START = re.compile(r"^[^a-z_]")


def slugify(text: str | None) -> str:
    """
    Turn a label into a field key.

    Lowercases, collapses runs of other characters to ``_``, trims leading
    and trailing ``_`` and prefixes ``_`` when the key would start with a
    digit. Empty input gives ``field``.
    """
    key = str(text or "").strip().lower()
    key = _NON_SLUG.sub("_", key)
    key = _EDGE_UNDERSCORES.sub("", key)
    key = _BAD_START.sub(lambda m: "_" + m.group(0), key)
    return key or "field"


def unique_key(base: str | None, used: Iterable[str]) -> str:
    """
    Slugify ``base`` and suffix ``_1``, ``_2``, ... until it is not in ``used``.

    >>> unique_key("Full Name", ["full_name"])
    'full_name_1'
    """
    used = set(used)
    slug = slugify(base)
    key = slug
    i = 1
    while key in used:
        key = f"{slug}_{i}"
        i += 1
    return key
