"""Unit tests for the confidence band classifier."""

import pytest

from hindi_dictionary.core.confidence import classify_confidence
from hindi_dictionary.models.domain import ConfidenceBand


@pytest.mark.parametrize(
    "score,expected",
    [
        (1.0, ConfidenceBand.HIGH),
        (0.9, ConfidenceBand.HIGH),
        (0.85, ConfidenceBand.HIGH),
        (0.8499, ConfidenceBand.MEDIUM),
        (0.7, ConfidenceBand.MEDIUM),
        (0.65, ConfidenceBand.MEDIUM),
        (0.6499, ConfidenceBand.LOW),
        (0.1, ConfidenceBand.LOW),
        (0.0, ConfidenceBand.LOW),
    ],
)
def test_band_boundaries(score, expected):
    assert classify_confidence(score) == expected


def test_bands_partition_unit_interval():
    """Every score in [0, 1] lands in exactly one band, in order."""
    order = [ConfidenceBand.LOW, ConfidenceBand.MEDIUM, ConfidenceBand.HIGH]
    previous = 0
    for step in range(0, 1001):
        band = classify_confidence(step / 1000)
        position = order.index(band)
        assert position >= previous
        previous = position
    assert previous == 2


def test_custom_thresholds():
    assert classify_confidence(0.8, high_threshold=0.75, medium_threshold=0.5) == ConfidenceBand.HIGH
    assert classify_confidence(0.6, high_threshold=0.75, medium_threshold=0.5) == ConfidenceBand.MEDIUM
