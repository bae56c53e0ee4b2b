#!/usr/bin/env python3
"""
Print an Argon2 hash for the admin secret, to be used as ADMIN_PASSWORD_HASH.

Uso:
  python scripts/hash_admin_secret.py [--secret valor]
"""
from __future__ import annotations

import argparse
import getpass
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nullspire.core.security import hash_secret


def main() -> None:
    ap = argparse.ArgumentParser(description="Hash the shared admin secret")
    ap.add_argument("--secret", help="Secret to hash (default: prompt)")
    args = ap.parse_args()

    secret = args.secret or getpass.getpass("Admin secret: ")
    if not secret:
        raise SystemExit("Secret cannot be empty")
    print(hash_secret(secret))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:  # pragma: no cover - uso CLI
        sys.stderr.write("Aborted\n")
        raise SystemExit(1)
