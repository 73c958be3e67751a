"""User identifiers.

Users are keyed by UUIDs, the native primary key of the persistence layer.
Raw identifiers arriving from clients are checked here before any lookup.
"""

from uuid import UUID

from rede.domain.user.exceptions import InvalidUserIdError


def parse_user_id(raw: str | UUID) -> UUID:
    """Parse a client-supplied identifier into a UUID.

    Raises
    ------
    InvalidUserIdError
        If ``raw`` is not a well-formed UUID string
    """
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str):
        raise InvalidUserIdError(repr(raw))
    try:
        return UUID(raw.strip())
    except ValueError as e:
        raise InvalidUserIdError(raw) from e
