import re
from typing import Optional

_LATIN_LETTER = re.compile(r"[A-Za-z]")
_CJK_IDEOGRAPH = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")

# More Latin letters than this (and no CJK) reads as English
MIN_LATIN_LETTERS = 5


def detect_language(text: str) -> str:
    """Classify a message as "en" or "zh" from its characters."""
    text = text or ""
    latin_count = len(_LATIN_LETTER.findall(text))
    if latin_count > MIN_LATIN_LETTERS and not _CJK_IDEOGRAPH.search(text):
        return "en"
    return "zh"


def resolve_language(message: str, requested: Optional[str], policy: str = "explicit") -> str:
    if policy == "detect":
        return detect_language(message)
    return "en" if requested == "en" else "zh"
