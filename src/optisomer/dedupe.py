# -*- coding: ascii -*-
"""Observed-set bookkeeping for isomer deduplication."""

from typing import Dict, Hashable, Optional, Tuple

from .configuration import Configuration, canonical_key, configuration_index

KEY_POLICIES = ('text', 'index')


def compute_key(config: Configuration, policy: str = 'text') -> Hashable:
    """
    Compute the dedup key of a configuration.

    Args:
        config: Configuration to key
        policy: "text" for the '0'/'1' rendering, "index" for the integer value
            of the bit pattern. Both are bijective on fixed-length patterns.

    Returns:
        Hashable dedup key
    """
    if policy == 'text':
        return canonical_key(config)
    if policy == 'index':
        return configuration_index(config)
    raise ValueError(f"Unknown dedup key policy '{policy}'. Must be one of: {', '.join(KEY_POLICIES)}")


class ObservedSet:
    """
    Keys of isomers already emitted in one enumeration run.

    Maps each key to the generation index of the configuration it was
    committed for. Only grows; a fresh instance is used per run.
    """

    def __init__(self, policy: str = 'text'):
        if policy not in KEY_POLICIES:
            raise ValueError(f"Unknown dedup key policy '{policy}'. Must be one of: {', '.join(KEY_POLICIES)}")
        self.policy = policy
        self._seen: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._seen)

    def __contains__(self, config: Configuration) -> bool:
        return compute_key(config, self.policy) in self._seen

    def early_check(self, config: Configuration, qa_bus: Optional[Dict[str, int]] = None,
                    metric: str = 'rotational_duplicates') -> Tuple[Hashable, bool]:
        """
        Check whether a configuration's key was already committed.

        Does NOT add the key; call commit() for the configuration that is
        actually emitted.

        Returns:
            (key, is_duplicate) tuple
        """
        key = compute_key(config, self.policy)
        if key in self._seen:
            if qa_bus is not None:
                qa_bus[metric] = qa_bus.get(metric, 0) + 1
            return key, True
        return key, False

    def commit(self, config: Configuration, index: int) -> Hashable:
        """Record an emitted configuration under its generation index."""
        key = compute_key(config, self.policy)
        self._seen[key] = index
        return key

    def marker(self, config: Configuration) -> Optional[int]:
        """Generation index the configuration was committed under, if any."""
        return self._seen.get(compute_key(config, self.policy))
