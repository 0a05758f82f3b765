from __future__ import annotations

import os
import sys
from pathlib import Path

# Allow running as: python scripts/issue_token.py [subject] [scope ...]
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from petstore.auth import READ_PETS, WRITE_PETS, issue_token
from petstore.settings import get_settings


def main(argv: list[str]) -> int:
    subject = argv[0] if argv else "petstore-dev"
    scopes = argv[1:] or [READ_PETS, WRITE_PETS]
    ttl = int(os.getenv("TOKEN_TTL_SECONDS") or 3600)

    s = get_settings()
    print(issue_token(subject=subject, scopes=scopes, secret=s.auth_secret, ttl_seconds=ttl))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
