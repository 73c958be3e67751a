"""Default avatar derivation from the in-game name."""

AVATAR_BASE_URL = "https://mc-heads.net/avatar"
AVATAR_SIZE = 400


def default_avatar_url(ign: str) -> str:
    """Return the avatar image URL for an in-game name.

    The image service is never contacted; the URL is only built.
    """
    return f"{AVATAR_BASE_URL}/{ign}/{AVATAR_SIZE}"
