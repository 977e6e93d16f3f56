# dqpskmod

A π/4-DQPSK baseband modulator. Each symbol (0–3, one bit pair) moves the
phase by an odd multiple of π/4. The resulting constellation point is
upsampled to 8 samples per symbol (the point followed by seven zeros) and
shaped by a 49-tap root-raised-cosine FIR filter. Each output sample is
packed into a 32-bit word: the real part, scaled by 32767 and truncated, is
held as a 16-bit two's-complement value in the upper half and the imaginary
part in the lower half.

## Phase steps

| Symbol | Bits | Phase change |
|--------|------|--------------|
| 0      | 00   | +π/4         |
| 1      | 01   | +3π/4        |
| 2      | 10   | −π/4         |
| 3      | 11   | −3π/4        |

The phase starts at 0 and is kept modulo 2π (eight states).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from dqpskmod.modulator import Modulator
from dqpskmod.rrcfilter import RRCFilter
from dqpskmod.transmitter import Transmitter, pack_sample, random_symbols

mod = Modulator()
point = mod.modulate(0)          # (0.7071…+0.7071…j), phase now 1 (π/4)
mod.phase                        # current phase in multiples of π/4
mod.angle                        # the same in radians
mod.reset()                      # phase back to 0

shaper = RRCFilter()             # default taps; RRCFilter(taps) takes others
y = shaper.process(point)        # one filtered complex sample
shaper.reset()                   # clear the filter history

word = pack_sample(0.5 - 0.25j)  # 32-bit word: I in the high half, Q in the low half

tx = Transmitter()               # Transmitter(upsample_rate=...) to change it
words = tx.put_symbol(3)         # list of 8 packed words for one symbol
```

`Modulator.modulate` raises `ValueError` for a symbol outside 0–3.

`Transmitter.stream(symbols)` takes any iterable of symbols and yields packed
words as they are produced. `random_symbols(rng)` yields an endless series of
random symbols drawn from a `random.Random` instance (a fresh unseeded one if
none is given), so a repeatable stream follows from a seeded generator.

## Command line

```
dqpskmod
```

Runs the transmitter and writes the packed 32-bit sample words to standard
output until interrupted or the pipe closes. Options:

- `-n COUNT`, `--count COUNT` — send this many symbols and stop
  (default: run forever).
- `--seed SEED` — seed for the random symbol generator.
- `--circle` — send symbol 0 over and over as a test pattern instead of
  random symbols.
- `--format {hex,raw}` — write each word as an 8-digit hex line (default)
  or as 4 little-endian bytes.

Example:

```
dqpskmod --count 100 --seed 1 --format raw > samples.bin
```

## What it does not do

The package only computes the sample stream. It does not drive any audio or
I2S hardware, set sample rates or clocks, or play the samples out; the words
go to standard output or to the caller, and sending them to a device is left
to other tools.