#!/usr/bin/env python3
"""
Reset a user's password in the School Portal SQLite database.

This script DOES NOT read or reveal any existing passwords.  It simply
sets a new password hash (same format the API writes) for every user
with the given email.

Usage:
    python reset_password.py --db ./school_portal.db --email jan@example.nl --password "NieuwWachtwoord!1"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sys
from typing import List, Optional

from school_portal_api.app.core.db import Database
from school_portal_api.app.core.security import hash_password


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset a School Portal user password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./school_portal.db)")
    ap.add_argument("--email", required=True, help="User email to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    hashed = hash_password(new_password)

    db = Database(args.db)
    db.open()
    try:
        updated = db.execute('UPDATE "user" SET wachtwoord = ? WHERE email = ?', (hashed, args.email))
        if not updated:
            print(f"[!] No user found with email: {args.email}", file=sys.stderr)
            return 2
        print(f"[+] Password updated for user: {args.email}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
