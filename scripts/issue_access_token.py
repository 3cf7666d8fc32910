#!/usr/bin/env python3
"""
Print a bearer access token for an existing account.
Useful for calling the import API from scripts or curl without logging in.

Usage (from the project root):
  .venv/bin/python scripts/issue_access_token.py --email dpa@example.com

DATABASE_URL and ACCESS_TOKEN_SECRET must be set (or present in .env).
"""
import argparse
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import select

from src.crew_tool.database import SessionLocal
from src.crew_tool.models.account import Account
from src.crew_tool.services.access_token import issue_access_token


def main():
    parser = argparse.ArgumentParser(
        description="Issue a bearer access token for an account"
    )
    parser.add_argument("--email", required=True, help="Email address of the account")
    args = parser.parse_args()

    email = args.email.strip().lower()
    db = SessionLocal()
    try:
        account = db.execute(select(Account).where(Account.email == email)).scalar_one_or_none()
        if not account:
            print(f"Error: no account found for '{email}'", file=sys.stderr)
            sys.exit(1)
        if not account.is_active:
            print(f"Error: account '{email}' is inactive", file=sys.stderr)
            sys.exit(1)
        print(issue_access_token(account.id))
    finally:
        db.close()


if __name__ == "__main__":
    main()
