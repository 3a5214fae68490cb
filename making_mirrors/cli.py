"""Command-line entry point that mirrors every repository in a registry."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .mirror import mirror_all
from .paths import expand_path
from .registry import RegistryError, read_registry

APP_NAME = "making-mirrors"
APP_VERSION = "0.0.3"
APP_DESCRIPTION = "A tool for creating mirrors of Git repositories"
APP_LICENSE = "MIT"
DEFAULT_REGISTRY_FILE = "$HOME/Code/mirrors/registry.txt"
DEFAULT_MIRRORS_DIR = "$HOME/Code/mirrors"


@dataclass(frozen=True)
class BuildInfo:
    """Build-time information about the application."""

    version: str = ""
    git_commit: str = ""
    build_time: str = ""
    python_version: str = ""


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument(
        "-input", "--input", default=DEFAULT_REGISTRY_FILE, help="Path to the registry CSV file"
    )
    parser.add_argument(
        "-output", "--output", default=DEFAULT_MIRRORS_DIR, help="Directory to store mirrors"
    )
    parser.add_argument(
        "-version", "--version", action="store_true", help="Show version information"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Mirror the repositories listed in the registry; return an exit status."""
    print(f"{APP_NAME} v{APP_VERSION}")
    print(APP_DESCRIPTION)
    print("===")

    args = _parser().parse_args(argv)

    if args.version:
        print(f"{APP_NAME} version {APP_VERSION}")
        print(f"License: {APP_LICENSE}")
        return 0

    mirrors_dir = expand_path(args.output)
    print(f"Output directory: {mirrors_dir}")
    registry_file = expand_path(args.input)
    print(f"Registry file: {registry_file}")

    try:
        Path(mirrors_dir).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Failed to create mirrors directory: {exc}", file=sys.stderr)
        return 1

    try:
        repos = read_registry(registry_file)
    except RegistryError as exc:
        print(f"Failed to read registry: {exc}", file=sys.stderr)
        return 1

    print(f"Found {len(repos)} repositories to mirror")

    workers = os.cpu_count() or 1
    print(f"Using {workers} workers (CPU cores)")

    print("\nMirroring repositories...")
    success_count = 0
    for result in mirror_all(mirrors_dir, repos, workers):
        print(result, flush=True)
        if result.success:
            success_count += 1

    print(f"\nCompleted! Successfully mirrored {success_count}/{len(repos)} repositories")
    return 0


if __name__ == "__main__":
    sys.exit(main())