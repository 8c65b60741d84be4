"""test_score_bands.py
Tests for score band lookup.
"""
import pytest

from resume_engine.ats.score_bands import (
    SCORE_BANDS,
    clamp_score,
    get_score_band,
    get_score_color,
    get_score_label,
)


class TestScoreBands:

    @pytest.mark.parametrize("score, label", [
        (0, "Needs Work"),
        (39, "Needs Work"),
        (39.9, "Needs Work"),
        (40, "Fair Match"),
        (69, "Fair Match"),
        (70, "Good Match"),
        (89, "Good Match"),
        (90, "Excellent Match"),
        (100, "Excellent Match"),
    ])
    def test_lower_bounds_are_inclusive(self, score, label):
        assert get_score_label(score) == label

    @pytest.mark.parametrize("score, label", [(-5, "Needs Work"), (150, "Excellent Match")])
    def test_out_of_range_scores_are_clamped(self, score, label):
        assert get_score_label(score) == label

    def test_colors(self):
        assert get_score_color(95).text == "text-emerald-400"
        assert get_score_color(75).bg == "bg-green-500"
        assert get_score_color(50).border == "border-amber-500"
        assert get_score_color(10).gradient == "from-red-500 to-rose-400"

    def test_bands_are_ordered_highest_first(self):
        bounds = [band.lower_bound for band in SCORE_BANDS]
        assert bounds == sorted(bounds, reverse=True)
        assert bounds[-1] == 0

    def test_band_and_label_agree(self):
        for score in range(0, 101):
            assert get_score_band(score).label == get_score_label(score)

    def test_clamp_score(self):
        assert clamp_score(-1) == 0
        assert clamp_score(101) == 100
        assert clamp_score(55) == 55
