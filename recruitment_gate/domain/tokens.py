"""
Invitation Token Generator

Single-use tokens embedded in invitation links.
"""

import secrets

# 32 random bytes = 256 bits of entropy before encoding
TOKEN_BYTES = 32


def generate_invitation_token() -> str:
    """
    Generate a URL-safe, unguessable invitation token.

    Uniqueness is still enforced by the unique index on
    process_invitations.token; a collision fails the insert.
    """
    return secrets.token_urlsafe(TOKEN_BYTES)
