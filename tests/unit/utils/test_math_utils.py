"""Tests for math utility functions."""

from __future__ import annotations

import pytest

from tonalr.core.utils.math import clamp, signed_pow


def test_clamp_within_range():
    """Test clamping values within range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(0, 0, 10) == 0
    assert clamp(10, 0, 10) == 10


def test_clamp_outside_range():
    """Test clamping values outside range."""
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(-1.5, 0.0, 1.0) == 0.0


def test_signed_pow_keeps_sign():
    """Negative bases keep their sign instead of going complex."""
    assert signed_pow(-8.0, 1.0 / 3.0) == pytest.approx(-2.0)
    assert signed_pow(8.0, 1.0 / 3.0) == pytest.approx(2.0)
    assert signed_pow(0.0, 2.5) == 0.0
