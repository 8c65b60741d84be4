"""keyword_extractor.py
Turns free text into ATS keywords: tokens and known multi-word phrases,
normalized so that spelling variants compare equal.
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Set, Tuple

from resume_engine.config import PARSER_DEFAULTS
from resume_engine.text_helpers.vocabulary import (
    ATS_TECH_KEYWORDS,
    KEYWORD_ALIASES,
    KNOWN_PHRASES,
    SHORT_KEYWORDS,
    SLASH_KEYWORDS,
    STOP_WORDS,
)

# Punctuation only survives inside a token, or as a trailing + or # (c++, c#).
_TOKEN_RE = re.compile(r"[a-z0-9][a-z0-9+#./-]*[a-z0-9+#]|[a-z0-9]", re.IGNORECASE)


@dataclass
class Keyword:
    """
    One keyword found in a text.

    Attributes:
        key (str): Normalized form used for comparison.
        display (str): First surface form seen in the text.
        count (int): Number of occurrences.
        first_index (int): Token position of the first occurrence.
    """
    key: str
    display: str
    count: int = 1
    first_index: int = 0


def tokenize(text: str) -> List[str]:
    """
    Split text into surface tokens.

    Example:
        >>> tokenize("C++, Node.js and CI/CD (Python/Django).")
        ['C++', 'Node.js', 'and', 'CI/CD', 'Python', 'Django']
    """
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        token = match.group(0)
        if "/" in token and token.lower() not in SLASH_KEYWORDS:
            tokens.extend(_TOKEN_RE.findall(token.replace("/", " ")))
        else:
            tokens.append(token)
    return tokens


def stem_word(word: str) -> str:
    """Strip one plural or verb suffix from an alphabetic word."""
    if not word.isalpha():
        return word
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"
    if word.endswith("es") and len(word) > 4 and word[:-2].endswith(("ss", "x", "ch", "sh")):
        return word[:-2]
    if word.endswith("s") and len(word) > 3 and not word.endswith(("ss", "us", "is")):
        return word[:-1]
    if word.endswith("ing") and len(word) >= 6:
        return word[:-3]
    if word.endswith("ed") and len(word) >= 5:
        return word[:-2]
    return word


@lru_cache(maxsize=4096)
def normalize_keyword(term: str) -> str:
    """
    Comparison key of a token or phrase: lower-cased, aliased as a whole and
    word by word, each word stemmed.

    Aliasing each word keeps a phrase key equal to the key of the same words
    joined from single tokens ("RESTful API" and "restful" + "api" both give
    "rest api").

    Example:
        >>> normalize_keyword("ReactJS"), normalize_keyword("Databases")
        ('react', 'database')
    """
    lowered = " ".join(term.lower().split())
    lowered = KEYWORD_ALIASES.get(lowered, lowered)
    words = []
    for word in lowered.split():
        words.extend(KEYWORD_ALIASES.get(word, word).split())
    return " ".join(stem_word(word) for word in words)


def _build_phrase_index() -> Dict[int, Set[Tuple[str, ...]]]:
    index: Dict[int, Set[Tuple[str, ...]]] = {}
    for phrase in KNOWN_PHRASES:
        words = tuple(stem_word(word) for word in tokenize(phrase.lower()))
        index.setdefault(len(words), set()).add(words)
    return index


# Phrase length -> stemmed word tuples
_PHRASE_INDEX = _build_phrase_index()
_PHRASE_LENGTHS = sorted(_PHRASE_INDEX, reverse=True)


def _is_keyword_token(token: str) -> bool:
    lowered = token.lower()
    if not any(ch.isalpha() for ch in lowered):
        return False
    if len(lowered) < PARSER_DEFAULTS.MIN_KEYWORD_LENGTH and lowered not in SHORT_KEYWORDS:
        return False
    key = normalize_keyword(lowered)
    if lowered in ATS_TECH_KEYWORDS or key in ATS_TECH_KEYWORDS:
        return True
    return lowered not in STOP_WORDS and key not in STOP_WORDS


def extract_keywords(text: str) -> List[Keyword]:
    """
    Extract keywords from text in first-occurrence order.

    Known phrases ("machine learning") are matched longest-first before single
    tokens, so their words are not counted separately. Stop words, numbers and
    one-letter tokens (other than languages like "C" and "R") are dropped.
    Keywords that normalize to the same key are merged and counted together.

    Args:
        text (str): Any free text (job description or resume).

    Returns:
        List[Keyword]: Unique keywords ordered by first occurrence.
    """
    tokens = tokenize(text)
    stems = [stem_word(token.lower()) for token in tokens]
    keywords: Dict[str, Keyword] = {}

    def add(key: str, display: str, index: int):
        if key in keywords:
            keywords[key].count += 1
        else:
            keywords[key] = Keyword(key=key, display=display, first_index=index)

    i = 0
    while i < len(tokens):
        phrase_length = _match_phrase(stems, i)
        if phrase_length:
            surface = " ".join(tokens[i:i + phrase_length])
            add(normalize_keyword(surface), surface, i)
            i += phrase_length
            continue

        token = tokens[i]
        if _is_keyword_token(token):
            add(normalize_keyword(token), token, i)
        i += 1

    return list(keywords.values())


def _match_phrase(stems: List[str], start: int) -> int:
    """Length of the longest known phrase starting at `start`, or 0."""
    for length in _PHRASE_LENGTHS:
        window = tuple(stems[start:start + length])
        if len(window) == length and window in _PHRASE_INDEX[length]:
            return length
    return 0


def keyword_key_set(text: str) -> Set[str]:
    """
    Every comparison key present in a text: each token's key plus the key of
    every run of consecutive tokens up to the longest known phrase length.

    Used on the resume side so a job keyword matches regardless of how the
    resume groups its words.
    """
    token_keys = [normalize_keyword(token) for token in tokenize(text)]
    max_length = max(_PHRASE_LENGTHS, default=1)

    keys = set(token_keys)
    for start in range(len(token_keys)):
        for length in range(2, max_length + 1):
            window = token_keys[start:start + length]
            if len(window) < length:
                break
            keys.add(" ".join(window))
    return keys
