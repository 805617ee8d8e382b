from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from polysecret.errors import DegenerateInput, InsufficientPoints, NonIntegerResult
from polysecret.lagrange import interpolate_at, recover, select_points
from polysecret.points import Point

DATASET1 = [Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39)]


def _evaluate(coeffs, x):
    y = 0
    power = 1
    for c in coeffs:
        y += c * power
        power *= x
    return y


def test_reconstruct_secret_success():
    assert recover(DATASET1, 3) == 3
    assert recover(DATASET1[:3], 3) == 3


def test_recover_ignores_input_order():
    shuffled = [DATASET1[3], DATASET1[1], DATASET1[0], DATASET1[2]]
    assert recover(shuffled, 3) == 3
    # the selection is the first k by x, so (6, 39) is never used here
    assert select_points(shuffled, 3) == DATASET1[:3]


def test_recover_accepts_tuples_and_does_not_mutate():
    points = [(3, 12), (1, 4), (2, 7)]
    snapshot = list(points)
    assert recover(points, 3) == 3
    assert points == snapshot


def test_edge_cases():
    assert recover([Point(5, 42)], 1) == 42
    assert recover([(-2, 7), (2, 3)], 2) == 5
    with pytest.raises(ValueError):
        recover(DATASET1, 0)


def test_recover_insufficient_points():
    with pytest.raises(InsufficientPoints):
        recover(DATASET1[:2], 3)
    with pytest.raises(InsufficientPoints):
        recover([], 1)


def test_recover_duplicate_x_is_degenerate():
    with pytest.raises(DegenerateInput):
        recover([(1, 4), (1, 5), (3, 12)], 3)


def test_recover_non_integer_result():
    with pytest.raises(NonIntegerResult) as exc:
        recover([(1, 0), (3, 1)], 2)
    assert exc.value.value == Fraction(-1, 2)


def test_recover_dataset2_exact():
    points = [
        (1, 995085094601491),
        (2, 320923294898495900),
        (3, 196563650089608567),
        (4, 1016509518118225951),
        (5, 3711974121218449851),
        (6, 10788619898233492461),
        (7, 26709394976508342463),
        (8, 58725075613853308713),
        (9, 117852986202006511971),
        (10, 220003896831595324801),
    ]
    assert recover(points, 7) == -6290016743746469796


def test_interpolate_at_arbitrary_x():
    assert interpolate_at(DATASET1[:3], 6) == 39
    assert interpolate_at([(1, 0), (3, 1)], 0) == Fraction(-1, 2)
    with pytest.raises(InsufficientPoints):
        interpolate_at([], 0)


@st.composite
def polynomial_samples(draw):
    k = draw(st.integers(min_value=1, max_value=8))
    coeffs = draw(st.lists(st.integers(-10**6, 10**6), min_size=k, max_size=k))
    xs = draw(st.lists(st.integers(-60, 60), min_size=k, max_size=k, unique=True))
    points = [(x, _evaluate(coeffs, x)) for x in xs]
    return coeffs, points


@given(polynomial_samples())
def test_recover_returns_constant_term(sample):
    coeffs, points = sample
    assert recover(points, len(coeffs)) == coeffs[0]


@pytest.mark.parametrize("points", [[(0.5, 1), (2, 3)], [(1, 2.0), (2, 3)], [(True, 1), (2, 3)]])
def test_recover_rejects_non_integer_coordinates(points):
    with pytest.raises(TypeError):
        recover(points, 2)


def test_point_requires_int_coordinates():
    with pytest.raises(TypeError):
        Point(Fraction(1, 2), 3)
    with pytest.raises(TypeError):
        Point(1, "3")
