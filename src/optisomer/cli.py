# -*- coding: ascii -*-
"""Command line interface."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import formulas_env, load_config, validate_config
from .dedupe import KEY_POLICIES
from .isomers import EnumConfig, QAStats, enumerate_isomers
from .report import write_isomers, write_table

LOG = logging.getLogger(__name__)


def _center_count(value: str) -> int:
    """argparse type for the number of asymmetric centers."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of centers: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"number of centers must be non-negative: {n}")
    return n


def setup_rdkit_logging(level: str) -> None:
    """Quiet RDKit's own logger below the requested level."""
    from rdkit import RDLogger

    order = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    threshold = order.index(level) if level in order else order.index('WARNING')
    for name, rank in (('rdApp.debug', 0), ('rdApp.info', 1), ('rdApp.warning', 2), ('rdApp.error', 3)):
        if rank >= threshold:
            RDLogger.EnableLog(name)
        else:
            RDLogger.DisableLog(name)


def configure_logging(args) -> str:
    """Configure Python logging based on CLI arguments; returns the effective level."""
    log_level = 'ERROR' if args.quiet else args.log_level
    logging.basicConfig(
        level=getattr(logging, log_level),
        format='%(levelname)s - %(name)s - %(message)s'
    )
    return log_level


def apply_cli_overrides(config: Dict[str, Any], args) -> Dict[str, Any]:
    """
    Apply explicitly given CLI flags on top of the loaded configuration.

    Flags left at None keep the YAML value; the formulas toggle falls back to
    the environment before the YAML value.
    """
    if args.centers is not None:
        config['centers'] = args.centers
    if args.key_policy is not None:
        config['dedup']['key_policy'] = args.key_policy
    if args.table is not None:
        config['output']['table'] = args.table
    if args.smiles is not None:
        config['output']['smiles'] = args.smiles

    if args.formulas is not None:
        config['output']['formulas'] = args.formulas
    else:
        env_formulas = formulas_env()
        if env_formulas is not None:
            config['output']['formulas'] = env_formulas
    return validate_config(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='optisomer',
        description='Optisomer: distinct optical isomers for n asymmetric centers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            'Output: one line per isomer, "<config> <partner> <inverted>" followed by\n'
            '"dyad" and/or "achiral" when the flag holds. Runtime is exponential in the\n'
            'number of centers; expect long runs beyond about 24.'
        ),
    )
    parser.add_argument('centers', nargs='?', type=_center_count, default=None,
                        help='Number of asymmetric centers (default: 4, or "centers" from the config)')
    parser.add_argument('-c', '--config', help='YAML configuration file path')

    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default='WARNING',
                        help='Set logging level (default: WARNING)')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress all but error messages (equivalent to --log-level ERROR)')

    parser.add_argument('--formulas', dest='formulas', action='store_true', default=None,
                        help='Print a Fischer projection after each isomer (env: OPTISOMER_FORMULAS=1)')
    parser.add_argument('--no-formulas', dest='formulas', action='store_false',
                        help='Do not print Fischer projections')
    parser.add_argument('--key-policy', choices=list(KEY_POLICIES), default=None,
                        help='Observed-set key: text rendering or integer pattern (default: text)')
    parser.add_argument('--table', metavar='PATH', default=None,
                        help='Also write the isomers to a .csv or .parquet table')
    parser.add_argument('--smiles', dest='smiles', action='store_true', default=None,
                        help='Add an alditol SMILES column to the table (requires RDKit)')
    parser.add_argument('--no-smiles', dest='smiles', action='store_false',
                        help='Do not add the SMILES column')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    log_level = configure_logging(args)

    try:
        config = apply_cli_overrides(load_config(args.config), args)
    except (FileNotFoundError, ValueError) as e:
        LOG.error(f"Configuration error: {e}")
        sys.exit(1)

    cfg = EnumConfig.from_dict(config)
    output = config['output']
    if output['smiles'] and not output['table']:
        LOG.warning('SMILES column requested without a table; ignoring')

    stats = QAStats()
    try:
        isomers = enumerate_isomers(cfg, stats=stats)
    except OverflowError as e:
        LOG.error(f"Range error: {e}")
        sys.exit(1)
    except ValueError as e:
        LOG.error(f"Invalid enumeration settings: {e}")
        sys.exit(1)

    if output['table']:
        isomers = list(isomers)

    write_isomers(isomers, sys.stdout, formulas=output['formulas'])
    sys.stdout.flush()
    stats.log_summary()

    if output['table']:
        if output['smiles']:
            setup_rdkit_logging(log_level)
        write_table(isomers, output['table'], smiles=output['smiles'])


if __name__ == "__main__":
    main()
