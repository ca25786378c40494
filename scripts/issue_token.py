#!/usr/bin/env python3
"""Issue a bearer token for an existing user.

Usage:
    python scripts/issue_token.py <user-id>

The user is looked up in the database so the token carries the stored
email. Tokens expire after AUTH__TOKEN_TTL_HOURS.
"""

import asyncio
import sys
from uuid import UUID

import logfire

from blog.config import load_settings
from blog.domain.service import JWTService, UserService
from blog.domain.value import UserId
from blog.util.di import create_container
from blog.util.observability import configure_logfire


async def issue(user_id: UserId) -> str:
    """Look up the user and sign a token for them."""
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            jwt_service = await request_container.get(JWTService)
            user = await user_service.get_by_id(user_id)
            return jwt_service.create_token(user.id, user.email)
    finally:
        await container.close()


def main() -> int:
    """Print a token for the user ID given on the command line."""
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2

    configure_logfire(load_settings())
    user_id = UserId(UUID(sys.argv[1]))

    token = asyncio.run(issue(user_id))
    logfire.info("Token issued", user_id=str(user_id))
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
