# -*- coding: ascii -*-
"""
Binary stereocenter configurations and their generation.

A configuration assigns one of two spatial arrangements (0 or 1) to each
asymmetric center along the backbone, in backbone order. Position 1 is the
first element of the tuple.

Generation order:
=================
For n centers and index i in [1, 2^n], the configuration holds (i-1) written
in binary, least significant bit at position 1, zero padded to length n.
Iterating i from 1 to 2^n visits every bit pattern exactly once, in
increasing numeric order.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

LOG = logging.getLogger(__name__)

# The iteration counter is a signed 32-bit integer that has to hold 2^n.
MAX_CENTERS = 30

# Beyond this the enumeration still runs but takes a long time.
WARN_CENTERS = 24


@dataclass(frozen=True)
class Configuration:
    """Immutable assignment of 0/1 values to n stereocenters."""
    bits: Tuple[int, ...]

    def __post_init__(self):
        for bit in self.bits:
            if bit not in (0, 1):
                raise ValueError(f"Configuration bits must be 0 or 1, got {bit!r}")

    def __len__(self) -> int:
        return len(self.bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self.bits)

    def __getitem__(self, position: int) -> int:
        return self.bits[position]

    def __str__(self) -> str:
        return canonical_key(self)

    @classmethod
    def from_string(cls, text: str) -> 'Configuration':
        """Build a configuration from its key, e.g. '0110'."""
        try:
            return cls(tuple(int(ch) for ch in text))
        except ValueError:
            raise ValueError(f"Invalid configuration string: {text!r}") from None


def canonical_key(config: Configuration) -> str:
    """Render a configuration as a '0'/'1' string, position 1 first."""
    return ''.join('1' if bit else '0' for bit in config.bits)


def configuration_index(config: Configuration) -> int:
    """Integer value of the bit pattern (position 1 is the least significant bit)."""
    value = 0
    for position, bit in enumerate(config.bits):
        value |= bit << position
    return value


def check_center_count(n: int, max_centers: int = MAX_CENTERS, warn_centers: int = WARN_CENTERS) -> int:
    """
    Validate the number of stereocenters before enumeration.

    Args:
        n: Number of asymmetric centers
        max_centers: Largest n whose 2^n still fits the iteration counter
        warn_centers: Largest n enumerated without a performance warning

    Returns:
        Number of configurations to enumerate (2^n)

    Raises:
        ValueError: n is negative
        OverflowError: 2^n does not fit the iteration counter
    """
    if n < 0:
        raise ValueError(f"Number of centers must be non-negative, got {n}")
    if n > max_centers:
        raise OverflowError(
            f"{n} centers give 2^{n} configurations, which overflows the "
            f"iteration counter (limit: {max_centers} centers)"
        )
    if n > warn_centers:
        LOG.warning(f"Enumerating 2^{n} configurations; runtime doubles with every extra center")
    return 1 << n


def generate_configuration(n: int, index: int) -> Configuration:
    """
    Return the configuration at generation index (1-based) for n centers.

    Position p holds bit (p-1) of (index-1).
    """
    if n < 0:
        raise ValueError(f"Number of centers must be non-negative, got {n}")
    if index < 1 or index > (1 << n):
        raise ValueError(f"Generation index {index} outside [1, {1 << n}]")
    value = index - 1
    return Configuration(tuple((value >> position) & 1 for position in range(n)))


def iter_configurations(n: int, max_centers: int = MAX_CENTERS,
                        warn_centers: int = WARN_CENTERS) -> Iterator[Tuple[int, Configuration]]:
    """
    Iterate (index, configuration) for every index in [1, 2^n], in order.

    The center count is checked when this is called, not on first iteration.
    """
    total = check_center_count(n, max_centers=max_centers, warn_centers=warn_centers)
    return ((index, generate_configuration(n, index)) for index in range(1, total + 1))
