import cmath

import pytest

from dqpskmod.modulator import ABSOLUTE_PHASES, Modulator


def test_symbol_zero_steps_plus_one():
    mod = Modulator()
    assert mod.modulate(0) == ABSOLUTE_PHASES[1]
    assert mod.phase == 1


def test_each_symbol_from_reset():
    expected = {0: 1, 1: 3, 2: 7, 3: 5}
    for symbol, phase in expected.items():
        mod = Modulator()
        assert mod.modulate(symbol) == ABSOLUTE_PHASES[phase]


def test_four_zero_symbols_reach_minus_one():
    mod = Modulator()
    for _ in range(4):
        out = mod.modulate(0)
    assert out == complex(-1.0, 0.0)


def test_phase_wraps_around():
    mod = Modulator()
    for _ in range(8):
        mod.modulate(0)
    assert mod.phase == 0
    mod.modulate(3)
    assert mod.phase == 5


def test_reset_restores_initial_phase():
    mod = Modulator()
    mod.modulate(1)
    mod.reset()
    assert mod.phase == 0
    assert mod.modulate(0) == ABSOLUTE_PHASES[1]


@pytest.mark.parametrize("symbol", [4, 5, -1, 100])
def test_invalid_symbol_raises_and_keeps_state(symbol):
    mod = Modulator()
    mod.modulate(1)
    with pytest.raises(ValueError):
        mod.modulate(symbol)
    assert mod.phase == 3


def test_all_outputs_on_unit_circle():
    mod = Modulator()
    outputs = [mod.modulate(symbol) for symbol in [0, 1, 2, 3] * 4]
    assert len(outputs) == 16
    for point in outputs:
        assert abs(point) == pytest.approx(1.0, abs=1e-6)


def test_output_angle_matches_phase():
    mod = Modulator()
    for symbol in [0, 1, 2, 3, 3, 1, 0, 2]:
        out = mod.modulate(symbol)
        diff = cmath.phase(out) - mod.angle
        assert cmath.exp(1j * diff) == pytest.approx(1.0, abs=1e-6)