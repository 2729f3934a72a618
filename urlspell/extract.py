"""
Site extraction - pulls hostname tokens out of raw text.
"""
import re
from functools import lru_cache
from typing import List, Optional

from .config import get_settings


@lru_cache(maxsize=8)
def _compile(pattern: str) -> re.Pattern:
    regex = re.compile(pattern)
    if "site" not in regex.groupindex:
        raise ValueError(f"Site pattern must define a 'site' group: {pattern!r}")
    return regex


def extract_sites(text: str, pattern: Optional[str] = None) -> List[str]:
    """
    Return every site found in `text`, lowercased, in order of appearance.

    "see https://Docs.rs/regex/ and https://docs.rs/serde/" -> ["docs.rs", "docs.rs"]
    """
    if not text:
        return []
    regex = _compile(pattern or get_settings().SITE_PATTERN)
    return [m.group("site") for m in regex.finditer(text.lower())]
