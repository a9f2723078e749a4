# -*- coding: ascii -*-
"""
Enumeration of distinct optical isomers for n stereocenters.

Every configuration is generated in index order. Its canonical partner
(invert, then reverse) is looked up in the observed set; when an earlier
emitted configuration is that partner, the current one is the same molecule
rotated by 180 degrees and is skipped. Otherwise the configuration itself is
committed and emitted with its dyad and achiral flags.

The observed set only ever holds keys of emitted configurations, never of
their partners, so the first member of each rotational pair in generation
order is the one reported.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .configuration import (
    MAX_CENTERS,
    WARN_CENTERS,
    Configuration,
    canonical_key,
    iter_configurations,
)
from .dedupe import ObservedSet
from .symmetry import invert, reverse

LOG = logging.getLogger(__name__)


class EnumConfig:
    """
    Configuration for isomer enumeration.

    Args:
        centers: Number of asymmetric centers (default: 4)
        key_policy: Observed-set key policy, "text" or "index" (default: "text")
        max_centers: Largest center count the iteration counter can hold
        warn_centers: Largest center count enumerated without a performance warning
    """

    def __init__(self, centers: int = 4, key_policy: str = 'text',
                 max_centers: int = MAX_CENTERS, warn_centers: int = WARN_CENTERS):
        self.centers = centers
        self.key_policy = key_policy
        self.max_centers = max_centers
        self.warn_centers = warn_centers

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'EnumConfig':
        """Build from a merged YAML configuration dict."""
        limits = config.get('limits', {}) or {}
        dedup = config.get('dedup', {}) or {}
        return cls(
            centers=int(config.get('centers', 4)),
            key_policy=dedup.get('key_policy', 'text'),
            max_centers=int(limits.get('max_centers', MAX_CENTERS)),
            warn_centers=int(limits.get('warn_centers', WARN_CENTERS)),
        )

    def __repr__(self) -> str:
        return (f"EnumConfig(centers={self.centers}, key_policy={self.key_policy!r}, "
                f"max_centers={self.max_centers}, warn_centers={self.warn_centers})")


@dataclass(frozen=True)
class IsomerRecord:
    """One distinct isomer as emitted by the enumeration."""
    index: int
    configuration: Configuration
    partner: Configuration
    inverted: Configuration
    dyad: bool
    achiral: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'configuration': canonical_key(self.configuration),
            'partner': canonical_key(self.partner),
            'inverted': canonical_key(self.inverted),
            'dyad': self.dyad,
            'achiral': self.achiral,
        }


class QAStats:
    """Per-run counters for the enumeration."""

    def __init__(self):
        self.generated = 0
        self.emitted = 0
        self.rotational_duplicates = 0
        self.dyads = 0
        self.achiral = 0

    def record(self, isomer: IsomerRecord):
        self.emitted += 1
        if isomer.dyad:
            self.dyads += 1
        if isomer.achiral:
            self.achiral += 1

    @property
    def chiral(self) -> int:
        """Emitted isomers that differ from their own reversal."""
        return self.emitted - self.achiral

    def to_dict(self) -> Dict[str, int]:
        return {
            'generated': self.generated,
            'emitted': self.emitted,
            'rotational_duplicates': self.rotational_duplicates,
            'dyads': self.dyads,
            'achiral': self.achiral,
            'chiral': self.chiral,
        }

    def log_summary(self):
        LOG.info(f"Enumeration summary - generated: {self.generated}, emitted: {self.emitted}, "
                 f"rotational duplicates: {self.rotational_duplicates}, "
                 f"dyads: {self.dyads}, achiral: {self.achiral}")


def classify(index: int, config: Configuration, observed: ObservedSet,
             qa_bus: Optional[Dict[str, int]] = None) -> Optional[IsomerRecord]:
    """
    Classify one generated configuration against the observed set.

    Returns:
        IsomerRecord when the configuration is a newly found isomer (its key
        is then committed), None when it is the rotational partner of an
        isomer already emitted.
    """
    inverted = invert(config)
    reverted = reverse(inverted)

    _, is_duplicate = observed.early_check(reverted, qa_bus=qa_bus)
    if is_duplicate:
        LOG.debug(f"Skip {canonical_key(config)}: partner {canonical_key(reverted)} "
                  f"emitted at index {observed.marker(reverted)}")
        return None

    observed.commit(config, index)
    return IsomerRecord(
        index=index,
        configuration=config,
        partner=reverted,
        inverted=inverted,
        dyad=config == reverted,
        achiral=reverse(config) == config,
    )


def enumerate_isomers(cfg: EnumConfig, stats: Optional[QAStats] = None) -> Iterator[IsomerRecord]:
    """
    Iterate every distinct isomer for cfg.centers stereocenters in generation order.

    Arguments are validated when this is called, so errors surface before
    any isomer is produced.

    Raises:
        OverflowError: cfg.centers exceeds cfg.max_centers
        ValueError: negative center count or unknown key policy
    """
    observed = ObservedSet(cfg.key_policy)
    configurations = iter_configurations(cfg.centers, max_centers=cfg.max_centers,
                                         warn_centers=cfg.warn_centers)
    LOG.debug(f"Enumerating {cfg!r}")
    return _classify_all(configurations, observed, stats)


def _classify_all(configurations: Iterator[Tuple[int, Configuration]], observed: ObservedSet,
                  stats: Optional[QAStats]) -> Iterator[IsomerRecord]:
    qa_bus: Dict[str, int] = {}
    for index, config in configurations:
        if stats is not None:
            stats.generated += 1
        isomer = classify(index, config, observed, qa_bus=qa_bus)
        if stats is not None:
            stats.rotational_duplicates = qa_bus.get('rotational_duplicates', 0)
        if isomer is None:
            continue
        if stats is not None:
            stats.record(isomer)
        yield isomer


def enumerate_with_stats(cfg: EnumConfig) -> Tuple[List[IsomerRecord], Dict[str, int]]:
    """
    Enumerate all isomers and return them with the final QA counters.

    Returns:
        (isomers, qa_stats_dict)
    """
    stats = QAStats()
    isomers = list(enumerate_isomers(cfg, stats=stats))
    stats.log_summary()
    return isomers, stats.to_dict()
