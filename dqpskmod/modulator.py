"""Differential QPSK symbol mapping with pi/4 phase steps."""

from __future__ import annotations

import math

NUMBER_OF_SYMBOLS = 4
NUMBER_OF_PHASES = 8

# Phase change, in multiples of pi/4, for each bit pair 00, 01, 10, 11.
SYMBOL_PHASE_DIFFS: tuple[int, ...] = (1, 3, -1, -3)

_R = 0.7071067690849304

# I/Q value of each absolute phase, indexed by multiples of pi/4.
ABSOLUTE_PHASES: tuple[complex, ...] = (
    complex(1.0, 0.0),
    complex(_R, _R),
    complex(0.0, 1.0),
    complex(-_R, _R),
    complex(-1.0, 0.0),
    complex(-_R, -_R),
    complex(0.0, -1.0),
    complex(_R, -_R),
)


class Modulator:
    """Stateful differential modulator mapping 2-bit symbols to I/Q points."""

    def __init__(self) -> None:
        self.phase = 0

    def reset(self) -> None:
        """Return the modulator to its initial phase."""
        self.phase = 0

    def modulate(self, symbol: int) -> complex:
        """Advance the phase by the step for ``symbol`` and return the new point."""
        if not 0 <= symbol < NUMBER_OF_SYMBOLS:
            raise ValueError(f"invalid symbol provided to modulate() - {symbol}")
        self.phase = (self.phase + SYMBOL_PHASE_DIFFS[symbol]) % NUMBER_OF_PHASES
        return ABSOLUTE_PHASES[self.phase]

    @property
    def angle(self) -> float:
        """Current absolute phase in radians."""
        return self.phase * math.pi / 4