#!/usr/bin/env python3
"""Show how to publish updated Firestore security rules.

The rules themselves are deployed by hand, either through the Firebase Console
or with ``firebase deploy --only firestore:rules``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from admintools.cli import add_rules_notice_arguments, execute, run_rules_notice


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print Firestore security rules update steps")
    add_rules_notice_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(list(argv) if argv is not None else None)
    return execute(run_rules_notice, args)


if __name__ == "__main__":
    raise SystemExit(main())
