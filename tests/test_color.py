import pytest

from rendermath.core.color import Srgba


def test_srgba_channels():
    c = Srgba(1.0, 0.5, 0.0, 1.0)
    assert c.r == 1.0
    assert c.to_tuple() == (1.0, 0.5, 0.0, 1.0)


def test_srgba_range_checked():
    with pytest.raises(ValueError):
        Srgba(1.5, 0.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        Srgba(0.0, 0.0, 0.0, float("nan"))


def test_to_linear():
    r, g, b, a = Srgba(1.0, 0.5, 0.0, 0.25).to_linear()
    assert r == pytest.approx(1.0)
    assert g == pytest.approx(0.21404, abs=1e-5)
    assert b == 0.0
    assert a == 0.25


def test_from_bytes():
    assert Srgba.from_bytes(255, 0, 51) == Srgba(1.0, 0.0, 0.2, 1.0)
