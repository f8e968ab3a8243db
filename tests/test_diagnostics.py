import pytest

from three_body.constants import EPSILON, G
from three_body.data_models import Body
from three_body.diagnostics import (
    center_of_mass,
    kinetic_energy,
    potential_energy,
    relative_energy_drift,
    total_energy,
    total_momentum,
)


def _pair():
    return [
        Body("A", 2.0, 5.0, (0.0, 0.0), (3.0, 4.0)),
        Body("B", 6.0, 5.0, (100.0, 0.0), (-1.0, 0.0)),
    ]


def test_kinetic_energy():
    # 0.5*2*25 + 0.5*6*1
    assert kinetic_energy(_pair()) == pytest.approx(28.0)


def test_potential_energy():
    assert potential_energy(_pair()) == pytest.approx(-G * 12.0 / 100.0)


def test_potential_energy_uses_floor():
    bodies = _pair()
    bodies[1].position = (1.0, 0.0)

    assert potential_energy(bodies) == pytest.approx(-G * 12.0 / EPSILON)


def test_total_energy():
    assert total_energy(_pair()) == pytest.approx(28.0 - G * 12.0 / 100.0)


def test_momentum_and_center_of_mass():
    bodies = _pair()

    assert total_momentum(bodies) == (0.0, 8.0)
    assert center_of_mass(bodies) == (75.0, 0.0)


def test_relative_energy_drift():
    assert relative_energy_drift(-100.0, -99.0) == pytest.approx(0.01)
    assert relative_energy_drift(0.0, 0.5) == 0.5
