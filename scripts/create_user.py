"""Create a user directly in the JSON data file.

Usage:
    python -m scripts.create_user <name> <email> [--admin] [--password PASSWORD]
If the password is omitted, a random one is printed. Run it while the server
is stopped: a running server keeps its own copy of the workspace and would
overwrite the file on its next save.
"""

import argparse
import asyncio
import secrets
import sys

from casetrack.core.config import get_settings
from casetrack.core.lifespan import open_workspace
from casetrack.domain.enums import Permission
from casetrack.domain.exceptions import CaseTrackException


async def main() -> None:
    parser = argparse.ArgumentParser(description="Create a casetrack user")
    parser.add_argument("name")
    parser.add_argument("email")
    parser.add_argument("--admin", action="store_true", help="grant admin permission")
    parser.add_argument("--password", default=None)
    args = parser.parse_args()

    settings = get_settings()
    password = args.password or secrets.token_urlsafe(12)
    workspace = await open_workspace(settings)
    permission = Permission.ADMIN if args.admin else Permission.STANDARD
    try:
        user = await workspace.add_user(args.name, args.email, permission, password)
    except CaseTrackException as e:
        print(f"Could not create user: {e.message}", file=sys.stderr)
        sys.exit(1)
    print(f"Created user {user.id} ({user.email}, {user.permission.value}) in {settings.data_file}")
    if not args.password:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
