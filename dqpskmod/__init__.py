"""π/4-DQPSK modulator, root-raised-cosine filter and packed-sample transmitter."""

__version__ = "0.1.0"
__all__ = ["modulator", "rrcfilter", "transmitter"]