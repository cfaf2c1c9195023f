#!/usr/bin/env python3
"""Print the Firebase CLI command that registers a Firestore admin account."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from admintools.cli import add_create_admin_arguments, execute, run_create_admin


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an admin account document in Firestore")
    add_create_admin_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(list(argv) if argv is not None else None)
    return execute(run_create_admin, args)


if __name__ == "__main__":
    raise SystemExit(main())
