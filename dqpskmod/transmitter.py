"""Baseband DQPSK transmitter producing packed 16-bit I/Q sample words."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from collections.abc import Iterable, Iterator

from .modulator import Modulator
from .rrcfilter import RRCFilter

UPSAMPLE_RATE = 8
FULL_SCALE = 32767.0


def pack_sample(sample: complex) -> int:
    """Pack a complex sample into a 32-bit word: I in the high half, Q in the low."""
    real_part = int(sample.real * FULL_SCALE) & 0xFFFF
    imag_part = int(sample.imag * FULL_SCALE) & 0xFFFF
    return (real_part << 16) | imag_part


def random_symbols(rng: random.Random | None = None) -> Iterator[int]:
    """Yield an endless sequence of random symbols in the range 0-3."""
    rng = rng or random.Random()
    while True:
        yield rng.getrandbits(32) % 4


class Transmitter:
    """Modulates symbols, upsamples them and shapes them with the RRC filter."""

    def __init__(self, upsample_rate: int = UPSAMPLE_RATE) -> None:
        self.upsample_rate = upsample_rate
        self.modulator = Modulator()
        self.filter = RRCFilter()

    def put_symbol(self, symbol: int) -> list[int]:
        """Return the packed output words for one symbol."""
        phase = self.modulator.modulate(symbol)
        samples = itertools.chain([phase], itertools.repeat(0j, self.upsample_rate - 1))
        return [pack_sample(self.filter.process(s)) for s in samples]

    def stream(self, symbols: Iterable[int]) -> Iterator[int]:
        """Yield packed output words for every symbol in ``symbols``."""
        for symbol in symbols:
            yield from self.put_symbol(symbol)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dqpskmod", description="Generate a shaped DQPSK baseband sample stream."
    )
    parser.add_argument("-n", "--count", type=int, default=None,
                        help="number of symbols to send (default: forever)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--circle", action="store_true",
                        help="send symbol 0 repeatedly as a test pattern")
    parser.add_argument("--format", choices=("hex", "raw"), default="hex",
                        help="write words as hex lines or little-endian binary")
    args = parser.parse_args(argv)

    symbols: Iterable[int] = (
        itertools.repeat(0) if args.circle else random_symbols(random.Random(args.seed))
    )
    if args.count is not None:
        symbols = itertools.islice(symbols, args.count)

    words = Transmitter().stream(symbols)
    try:
        if args.format == "raw":
            out = sys.stdout.buffer
            for word in words:
                out.write(word.to_bytes(4, "little"))
            out.flush()
        else:
            for word in words:
                sys.stdout.write(f"{word:08x}\n")
            sys.stdout.flush()
    except (BrokenPipeError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())