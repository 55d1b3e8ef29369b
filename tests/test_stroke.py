"""
test_stroke.py
--------------
"""

import math

import numpy as np
import pytest

from scribble.geometry import Point
from scribble.stroke import Stroke


@pytest.fixture
def square():
    s = Stroke()
    for x, y in [(0, 0), (1, 0), (1, 1), (0, 1)]:
        s.append(x, y)
    return s


def test_empty_stroke():
    s = Stroke()
    assert len(s) == 0
    assert s.first is None and s.last is None
    assert s.to_array().shape == (0, 2)
    assert s.length() == 0.0
    assert repr(s) == "<Stroke points=0>"


def test_append_and_read(square):
    assert len(square) == 4
    assert square.first == Point(0, 0)
    assert square.last == Point(0, 1)
    assert square[2] == Point(1, 1)
    assert list(square) == [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
    assert square.xy == ([0.0, 1.0, 1.0, 0.0], [0.0, 0.0, 1.0, 1.0])


def test_index_errors(square):
    with pytest.raises(IndexError):
        square[4]
    with pytest.raises(TypeError):
        square[1:2]


def test_length(square):
    assert square.length() == pytest.approx(3.0)


def test_grows_past_capacity():
    s = Stroke(capacity=2)
    for i in range(100):
        s.append(i, -i)
    assert len(s) == 100
    assert s.capacity >= 100
    np.testing.assert_array_equal(s.to_array()[:, 0], np.arange(100))


def test_reserve_avoids_regrowth():
    s = Stroke()
    s.append(0, 0)
    s.reserve(500)
    cap = s.capacity
    assert cap >= 501
    for i in range(500):
        s.append(i, i)
    assert s.capacity == cap


def test_to_array_is_copy(square):
    arr = square.to_array()
    arr[0, 0] = 99
    assert square.first == Point(0, 0)


def test_equality(square):
    other = Stroke(capacity=100)
    for p in square:
        other.append(*p)
    assert square == other
    other.append(5, 5)
    assert square != other


def test_is_finite():
    s = Stroke()
    s.append(0, 0)
    assert s.is_finite()
    s.append(math.inf, 0)
    assert not s.is_finite()
