"""score_bands.py
Maps a match score to its band label and presentation classes.
"""
from dataclasses import dataclass
from typing import Tuple

from resume_engine.models import ScoreColor


@dataclass(frozen=True)
class ScoreBand:
    lower_bound: int
    label: str
    color: ScoreColor


# Highest band first; a score belongs to the first band whose lower bound it reaches.
SCORE_BANDS: Tuple[ScoreBand, ...] = (
    ScoreBand(
        lower_bound=90,
        label="Excellent Match",
        color=ScoreColor(
            text="text-emerald-400",
            bg="bg-emerald-500",
            border="border-emerald-500",
            gradient="from-emerald-500 to-green-400",
        ),
    ),
    ScoreBand(
        lower_bound=70,
        label="Good Match",
        color=ScoreColor(
            text="text-green-400",
            bg="bg-green-500",
            border="border-green-500",
            gradient="from-green-500 to-lime-400",
        ),
    ),
    ScoreBand(
        lower_bound=40,
        label="Fair Match",
        color=ScoreColor(
            text="text-amber-400",
            bg="bg-amber-500",
            border="border-amber-500",
            gradient="from-amber-500 to-yellow-400",
        ),
    ),
    ScoreBand(
        lower_bound=0,
        label="Needs Work",
        color=ScoreColor(
            text="text-red-400",
            bg="bg-red-500",
            border="border-red-500",
            gradient="from-red-500 to-rose-400",
        ),
    ),
)


def clamp_score(score: float) -> float:
    return max(0, min(100, score))


def get_score_band(score: float) -> ScoreBand:
    """
    Band for a score. Lower bounds are inclusive and out-of-range scores are
    clamped to 0-100 first.
    """
    score = clamp_score(score)
    for band in SCORE_BANDS:
        if score >= band.lower_bound:
            return band
    return SCORE_BANDS[-1]


def get_score_label(score: float) -> str:
    """
    Example:
        >>> get_score_label(39), get_score_label(40), get_score_label(150)
        ('Needs Work', 'Fair Match', 'Excellent Match')
    """
    return get_score_band(score).label


def get_score_color(score: float) -> ScoreColor:
    return get_score_band(score).color
