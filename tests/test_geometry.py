"""Tests for shared/geometry.py pure functions."""
import pytest
from shared.geometry import (
    GeometryError, stepped, seg_length, bar_length,
    fmt_num, fmt_fixed, fmt_mm,
)
from shared.types import Rebar


# --- stepped ---

def test_stepped_includes_stop():
    assert list(stepped(50, 450, 200)) == [50, 250, 450]


def test_stepped_stops_before_overshoot():
    assert list(stepped(50, 950, 200)) == [50, 250, 450, 650, 850]


def test_stepped_empty_when_start_past_stop():
    assert list(stepped(600, 400, 100)) == []


def test_stepped_accumulates():
    # 0.1 added ten times is 0.9999999999999999, not 1.0
    vals = list(stepped(0.0, 1.0, 0.1))
    assert len(vals) == 11
    assert vals[-1] != 1.0
    assert vals[-1] == pytest.approx(1.0)


def test_stepped_rejects_non_positive_step():
    with pytest.raises(GeometryError, match="positive"):
        list(stepped(0, 10, 0))
    with pytest.raises(GeometryError, match="positive"):
        list(stepped(0, 10, -5))


# --- lengths ---

def test_seg_length_345():
    assert abs(seg_length((0, 0), (3, 4)) - 5.0) < 1e-12


def test_bar_length_horizontal():
    assert bar_length(Rebar("horizontal", 50, 250, 950, 250)) == 900.0


# --- formatting ---

def test_fmt_num_integer_valued_float():
    assert fmt_num(8000.0) == "8000"


def test_fmt_num_fraction():
    assert fmt_num(62.5) == "62.5"


def test_fmt_fixed_pads():
    assert fmt_fixed(57.6, 2) == "57.60"
    assert fmt_fixed(9.0, 1) == "9.0"


def test_fmt_fixed_rounds_exact_half_up():
    # 0.125 is exact in binary; half-even would give 0.12
    assert fmt_fixed(0.125, 2) == "0.13"
    assert fmt_fixed(2.5, 0) == "3"


def test_fmt_fixed_inexact_half_follows_binary_value():
    # 1.005 is stored slightly below 1.005
    assert fmt_fixed(1.005, 2) == "1.00"


def test_fmt_mm():
    assert fmt_mm(6000.0) == "6000 mm"
