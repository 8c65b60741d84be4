"""patterns.py
Precompiled regular expressions shared by the parser and the ATS matcher.

None of these patterns nest quantifiers, so matching time stays linear in
the line length.
"""
import re

# ---- Whitespace / bullets ----
MULTI_SPACE_RE = re.compile(r"\s+")
BULLET_PREFIX_RE = re.compile(r"^\s*(?:[•●○◦▪▫■□‣∙·*►▸▹➤➢→✓✔]|[-–—](?=\s))\s*")

# ---- Contact details ----
# Starts only at a token boundary, and the domain is dot-separated labels.
EMAIL_RE = re.compile(r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]+@(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,}")

# A run of digits and phone punctuation, not glued to a word, URL or handle.
PHONE_CANDIDATE_RE = re.compile(r"(?<![\w/@.])\+?\(?\d[\d\s().-]{5,}\d(?![\w/])")

GITHUB_URL_RE = re.compile(
    r"(?:https?://)?(?:www\.)?github\.com/(?P<handle>[A-Za-z0-9][A-Za-z0-9_-]*)",
    re.IGNORECASE,
)
GITHUB_MENTION_RE = re.compile(r"github", re.IGNORECASE)
GITHUB_LABEL_RE = re.compile(
    r"github\s*[:|]\s*@?(?P<handle>[A-Za-z0-9][A-Za-z0-9_-]*)",
    re.IGNORECASE,
)
AT_HANDLE_RE = re.compile(r"(?<![\w.])@(?P<handle>[A-Za-z0-9][A-Za-z0-9_-]*)(?![\w.@])")

LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/(?P<slug>[A-Za-z0-9_%-]+)",
    re.IGNORECASE,
)

URL_RE = re.compile(
    r"(?:https?://|www\.)[^\s<>\"'{}|\\^`\[\]()]+"
    r"|\b(?:github\.com|gitlab\.com|bitbucket\.org)/[^\s<>\"'{}|\\^`\[\]()]+",
    re.IGNORECASE,
)
URL_TRAILING_PUNCTUATION = ".,;:!?)]}'\""

# ---- Dates ----
_MONTH = r"(?<![A-Za-z])(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?"
_DATE = rf"(?:{_MONTH}\s+)?(?:\d{{1,2}}/)?(?:19|20)\d{{2}}(?!\d)"
_OPEN_END = r"(?:present|current|now|ongoing|today)(?![A-Za-z])"

DATE_RANGE_RE = re.compile(
    rf"(?P<start>{_DATE})\s*(?:-|–|—|\bto\b|\buntil\b)\s*(?P<end>{_DATE}|{_OPEN_END})",
    re.IGNORECASE,
)
SINGLE_DATE_RE = re.compile(rf"(?<!\d){_DATE}", re.IGNORECASE)

# ---- Education cues ----
DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?:"
    r"bachelor(?:'s|’s|s)?|master(?:'s|’s|s)?|associate(?:'s|’s)|doctorate|diploma"
    r"|ph\.?\s?d\.?|mba|bba"
    r"|b\.?\s?sc?\.?|m\.?\s?sc?\.?|b\.?\s?tech\.?|m\.?\s?tech\.?|b\.?\s?eng\.?|m\.?\s?eng\.?"
    r"|b\.a\.|m\.a\.|b\.e\.|m\.e\.|ba|ma(?=\s+in\b)"
    r")(?![A-Za-z])",
    re.IGNORECASE,
)
SCHOOL_RE = re.compile(
    r"\b(?:university|college|institute|school|academy|polytechnic|universidad|universität)\b",
    re.IGNORECASE,
)

# ---- Generic ----
DIGIT_RE = re.compile(r"\d")
CAPITALIZED_WORD_RE = re.compile(r"^[A-Z][A-Za-z'’.-]*$")
INLINE_LABEL_RE = re.compile(r"^(?P<label>[A-Za-z][A-Za-z &/+-]{0,40}?)\s*:\s*(?P<rest>.*)$")
PAREN_CONTENT_RE = re.compile(r"\((?P<content>[^()]*)\)")
