"""Root-raised-cosine pulse-shaping FIR filter."""

from __future__ import annotations

from collections import deque

# Span of 6 symbols at 8 samples each, plus one for symmetry.
TAPS: tuple[float, ...] = (
    -0.0028965468899174998,
    -0.0032358975382416567,
    -0.0025791896973552855,
    -0.0008537298483591387,
    0.0017294783774642456,
    0.004671405683775374,
    0.007252551717854649,
    0.008667905271797399,
    0.008208427832625676,
    0.005454626197276931,
    0.0004404642246052356,
    -0.006252949375184442,
    -0.013504223085090056,
    -0.019771553228367652,
    -0.02331577635843313,
    -0.022494485078891235,
    -0.016077514982750497,
    -0.003525279521105954,
    0.014826237298844783,
    0.03771630873989669,
    0.06306564393508352,
    0.08822941266619351,
    0.11036085564536234,
    0.12682724803053408,
    0.1356083065374232,
    0.1356083065374232,
    0.12682724803053408,
    0.11036085564536234,
    0.08822941266619351,
    0.06306564393508352,
    0.03771630873989669,
    0.014826237298844783,
    -0.003525279521105954,
    -0.016077514982750497,
    -0.022494485078891235,
    -0.02331577635843313,
    -0.019771553228367652,
    -0.013504223085090056,
    -0.006252949375184442,
    0.0004404642246052356,
    0.005454626197276931,
    0.008208427832625676,
    0.008667905271797399,
    0.007252551717854649,
    0.004671405683775374,
    0.0017294783774642456,
    -0.0008537298483591387,
    -0.0025791896973552855,
    -0.0032358975382416567,
)

NUMBER_OF_FILTER_TAPS = len(TAPS)


class RRCFilter:
    """FIR filter over complex samples; the newest sample meets the first tap."""

    def __init__(self, taps: tuple[float, ...] = TAPS) -> None:
        self.taps = tuple(taps)
        self._state: deque[complex] = deque([0j] * len(self.taps), maxlen=len(self.taps))

    def reset(self) -> None:
        """Clear the filter history."""
        self._state.extend([0j] * len(self.taps))

    def process(self, sample: complex) -> complex:
        """Push one sample in and return the filtered output."""
        self._state.appendleft(complex(sample))
        return sum((tap * value for tap, value in zip(self.taps, self._state)), 0j)