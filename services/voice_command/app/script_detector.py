"""Unicode script detection for composed responses"""

import re
from typing import Dict, Optional, Pattern


def _block(first: int, last: int) -> Pattern[str]:
    return re.compile("[%s-%s]" % (chr(first), chr(last)))


# Unicode block per command-language base
SCRIPT_RANGES: Dict[str, Pattern[str]] = {
    "te": _block(0x0C00, 0x0C7F),  # Telugu
    "hi": _block(0x0900, 0x097F),  # Devanagari
    "ta": _block(0x0B80, 0x0BFF),  # Tamil
    "kn": _block(0x0C80, 0x0CFF),  # Kannada
    "ml": _block(0x0D00, 0x0D7F),  # Malayalam
    "bn": _block(0x0980, 0x09FF),  # Bengali
}


def language_base(locale: str) -> str:
    """Get the language part of a locale code ("te-IN" -> "te")"""
    return (locale or "").split("-")[0].lower()


def is_in_script(text: str, base: str) -> bool:
    """Check whether text contains characters of the script used by a language"""
    pattern = SCRIPT_RANGES.get(base)
    if pattern is None or not text:
        return False
    return pattern.search(text) is not None


def detect_script(text: str) -> Optional[str]:
    """Return the first language base whose script appears in text, if any"""
    for base, pattern in SCRIPT_RANGES.items():
        if pattern.search(text or ""):
            return base
    return None
