# shop_api/domain/models/identity.py

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodedIdentity:
    """
    Claims extracted from a verified token.

    Lives only for the duration of one request (attached to request.state).
    """

    user_id: str
    email: str
