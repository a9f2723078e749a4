# -*- coding: ascii -*-
"""
Symmetry transforms on stereocenter configurations.

Two mirror operations act on a configuration drawn as a Fischer projection:

1. Reversal: mirror across the plane perpendicular to the backbone, which
   swaps the top and bottom ends of the chain.
2. Inversion: mirror across the plane of projection, which flips the
   spatial arrangement at every center.

Applying both is a 180 degree in-plane rotation of the whole molecule, so a
configuration and its canonical partner invert(reverse(c)) describe the same
physical isomer. The two transforms commute and each is its own inverse.
"""

from .configuration import Configuration


def reverse(config: Configuration) -> Configuration:
    """Flip the position order of the configuration."""
    return Configuration(tuple(reversed(config.bits)))


def invert(config: Configuration) -> Configuration:
    """Flip every bit of the configuration."""
    return Configuration(tuple(1 - bit for bit in config.bits))


def canonical_partner(config: Configuration) -> Configuration:
    """Configuration of the same molecule rotated by 180 degrees."""
    return reverse(invert(config))


def is_dyad(config: Configuration) -> bool:
    """True when the configuration is fixed under the 180 degree rotation."""
    return config == canonical_partner(config)


def is_achiral(config: Configuration) -> bool:
    """True when the configuration reads the same from both ends."""
    return config == reverse(config)
