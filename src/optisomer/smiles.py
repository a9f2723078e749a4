# -*- coding: ascii -*-
"""
Alditol SMILES rendering of stereocenter configurations.

A configuration of n centers is drawn as the open-chain alditol
HOCH2-(CHOH)n-CH2OH, written top to bottom in Fischer order. Every center
has the same neighbor order in the SMILES string (upper carbon, implicit H,
hydroxyl, lower carbon), so a single chirality tag per bit value keeps the
Fischer left/right meaning: '@' for bit 0, '@@' for bit 1.
"""

import logging
from functools import lru_cache

from rdkit import Chem

from .configuration import Configuration, canonical_key

LOG = logging.getLogger(__name__)

CHIRAL_TAGS = {
    0: '@',
    1: '@@',
}


def alditol_smiles(config: Configuration) -> str:
    """Isomeric SMILES of the alditol chain, as written (not canonicalized)."""
    centers = ''.join(f"[C{CHIRAL_TAGS[bit]}H](O)" for bit in config.bits)
    return f"OC{centers}CO"


@lru_cache(maxsize=4096)
def _canonical_from_smiles(smi: str) -> str:
    mol = Chem.MolFromSmiles(smi)
    if mol is None:
        raise ValueError(f"RDKit could not parse generated SMILES: {smi}")
    return Chem.MolToSmiles(mol, isomericSmiles=True)


def canonical_smiles(config: Configuration) -> str:
    """RDKit canonical isomeric SMILES of the alditol for this configuration."""
    smi = alditol_smiles(config)
    canonical = _canonical_from_smiles(smi)
    LOG.debug(f"{canonical_key(config)} -> {canonical}")
    return canonical
