#!/usr/bin/env python3
"""
Lokale Pruefungen fuer Salão Agenda (Lint + Tests).

Aufruf:
    python scripts/run_checks.py                 # ruff + pytest
    python scripts/run_checks.py --no-lint       # nur pytest
    python scripts/run_checks.py -- -k agenda    # Argumente an pytest
"""

import argparse
import shutil
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEST_DIR = 'src/tests'
RUFF_ARGS = ['check', 'src/', '--select', 'E,F', '--ignore', 'E501']


def run_step(title, cmd):
    """Fuehrt einen Schritt aus; True bei Exit-Code 0."""
    print(f"\n── {title} " + "─" * max(0, 56 - len(title)))
    result = subprocess.run(cmd, cwd=PROJECT_ROOT)
    ok = result.returncode == 0
    print(f"   {title}: {'PASS' if ok else 'FAIL'} (Exit {result.returncode})")
    return ok


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument('--no-lint', action='store_true', help='ruff ueberspringen')
    parser.add_argument('pytest_args', nargs='*', help='zusaetzliche pytest-Argumente')
    args = parser.parse_args(argv)

    steps = []
    if args.no_lint:
        print("[SKIP] Lint (per --no-lint)")
    elif shutil.which('ruff') is None:
        print("[SKIP] Lint: ruff nicht installiert (pip install -e .[test])")
    else:
        steps.append(('Lint (ruff)', ['ruff', *RUFF_ARGS]))
    steps.append(('Tests (pytest)',
                  [sys.executable, '-m', 'pytest', TEST_DIR, '--tb=short', *args.pytest_args]))

    results = [(title, run_step(title, cmd)) for title, cmd in steps]
    failed = [title for title, ok in results if not ok]

    print("\nErgebnis: " + ("PASS" if not failed else f"FAIL ({', '.join(failed)})"))
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
