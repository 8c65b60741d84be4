"""tech_dictionary_scan.py
Finds known technology names in free text using the static technology dictionary.
"""
import re
from typing import Dict, List, Optional

from resume_engine.text_helpers.vocabulary import TECH_DICTIONARY


def _build_lookup() -> Dict[str, str]:
    lookup = {}
    for canonical, aliases in TECH_DICTIONARY.items():
        lookup[canonical.lower()] = canonical
        for alias in aliases:
            lookup[alias.lower()] = canonical
    return lookup


def _build_pattern(spellings) -> re.Pattern:
    # Longest spelling first so "React Native" wins over "React" at one position
    alternatives = [
        re.escape(spelling).replace(r"\ ", r"\s+")
        for spelling in sorted(spellings, key=len, reverse=True)
    ]
    return re.compile(
        r"(?<![\w.+#-])(?:" + "|".join(alternatives) + r")(?![\w+#])",
        re.IGNORECASE,
    )


_SPELLING_TO_CANONICAL = _build_lookup()
_TECH_RE = _build_pattern(_SPELLING_TO_CANONICAL)


def find_technologies(text: str, limit: Optional[int] = None) -> List[str]:
    """
    Return canonical technology names mentioned in `text`, in order of first
    mention, without duplicates.

    Example:
        >>> find_technologies("Built with react.js, Node and PostgreSQL")
        ['React', 'PostgreSQL']
    """
    found: List[str] = []
    for match in _TECH_RE.finditer(text):
        spelling = " ".join(match.group(0).lower().split())
        canonical = _SPELLING_TO_CANONICAL.get(spelling)
        if canonical and canonical not in found:
            found.append(canonical)
            if limit is not None and len(found) >= limit:
                break
    return found
