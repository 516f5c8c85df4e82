"""
Contract Registry Validator

Loads one or more YAML contract registries and reports whether every contract
in them is well formed.

Usage:
    conformlib-validate path/to/contracts.yaml [more.yaml ...] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from conformlib.core.errors import ContractError
from conformlib.registry.errors import RegistryError
from conformlib.registry.loader import ContractSet, load_contracts

logger = logging.getLogger(__name__)


def print_summary(contracts: ContractSet) -> None:
    """Print per-contract operation counts for a loaded registry."""
    print("=" * 70)
    print(f"REGISTRY {contracts.source} (version {contracts.version})")
    print("=" * 70)
    print(f"\nTotal contracts:  {len(contracts)}")
    print(f"Total operations: {contracts.total_operations()}")

    print("\nBy contract:")
    for name, contract in contracts.items():
        print(f"  {name:30s} {len(contract):3d}")

    print()


def validate_files(paths: Sequence[str]) -> list[str]:
    """Load every registry, printing summaries. Returns error messages."""
    errors: list[str] = []
    for path in paths:
        print(f"Loading contracts from: {path}")
        try:
            contracts = load_contracts(path)
        except RegistryError as e:
            errors.append(str(e))
            continue
        except ContractError as e:
            errors.append(f"{path}: {e}")
            continue
        print("✓ All contracts well formed")
        print_summary(contracts)
    return errors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conformlib-validate",
        description="Validate YAML contract registries.",
    )
    parser.add_argument("paths", nargs="+", help="Registry files to validate")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main validation routine. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Contract Registry Validator")
    print("-" * 70)
    print()

    errors = validate_files(args.paths)

    if errors:
        print("ERRORS:")
        for error in errors:
            print(f"  ✗ {error}")
        print()
        print("Validation FAILED with errors.")
        return 1

    print("Validation PASSED.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
