# -*- coding: ascii -*-
"""Text and table output for enumerated isomers."""

import logging
import os
from typing import Any, Dict, Iterable, List, TextIO

import pandas as pd

from .configuration import canonical_key
from .fisher import fischer_lines
from .isomers import IsomerRecord

LOG = logging.getLogger(__name__)

TABLE_COLUMNS = ('index', 'configuration', 'partner', 'inverted', 'dyad', 'achiral')

# Key columns are bit strings; keep leading zeros when reading CSV back
_STRING_COLUMNS = ('configuration', 'partner', 'inverted', 'smiles')


def format_isomer_line(isomer: IsomerRecord) -> str:
    """Render '<config> <partner> <inverted>[ dyad][ achiral]'."""
    line = ' '.join((
        canonical_key(isomer.configuration),
        canonical_key(isomer.partner),
        canonical_key(isomer.inverted),
    ))
    if isomer.dyad:
        line += ' dyad'
    if isomer.achiral:
        line += ' achiral'
    return line


def write_isomers(isomers: Iterable[IsomerRecord], stream: TextIO, formulas: bool = False) -> int:
    """
    Write one line per isomer to stream, optionally followed by its diagram.

    Returns:
        Number of isomers written
    """
    count = 0
    for isomer in isomers:
        stream.write(format_isomer_line(isomer) + '\n')
        if formulas:
            stream.write('\n'.join(fischer_lines(isomer.configuration)) + '\n')
        count += 1
    return count


def _prepare_records_for_table(isomers: Iterable[IsomerRecord],
                               smiles: bool = False) -> List[Dict[str, Any]]:
    rows = []
    for isomer in isomers:
        row = isomer.to_dict()
        if smiles:
            from .smiles import canonical_smiles
            row['smiles'] = canonical_smiles(isomer.configuration)
        rows.append(row)
    return rows


def write_table(isomers: Iterable[IsomerRecord], path: str, smiles: bool = False) -> int:
    """
    Write isomer records to a .csv or .parquet table.

    Returns:
        Number of rows written
    """
    if not (path.endswith('.csv') or path.endswith('.parquet')):
        raise ValueError(f"Unsupported file format: {path}")

    rows = _prepare_records_for_table(isomers, smiles=smiles)
    columns = list(TABLE_COLUMNS) + (['smiles'] if smiles else [])
    df = pd.DataFrame(rows, columns=columns)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if path.endswith('.parquet'):
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)
    LOG.info(f"Wrote {len(df)} isomers to {path}")
    return len(df)


def read_table(path: str) -> List[Dict[str, Any]]:
    """Read an isomer table back as a list of row dicts."""
    if not os.path.exists(path):
        return []

    if path.endswith('.parquet'):
        df = pd.read_parquet(path)
    elif path.endswith('.csv'):
        df = pd.read_csv(path, dtype={col: str for col in _STRING_COLUMNS}, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported file format: {path}")
    return df.to_dict('records')
