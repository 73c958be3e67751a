"""Permissions value object.

A fixed record of 13 capability flags. Storage and the HTTP contract use
camelCase keys (``canEditPost``); Python code uses the snake_case field
names (``can_edit_post``).
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from typing import Any


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class Permissions:
    """Content-moderation capabilities of a user.

    The defaults are the baseline every new account gets: full control
    over its own posts and comments, nothing elevated.
    """

    can_create_post: bool = True
    can_delete_post: bool = True
    can_edit_post: bool = True

    can_fix_post: bool = False
    can_delete_all_post: bool = False
    can_edit_all_post: bool = False

    can_create_comment: bool = True
    can_delete_comment: bool = True
    can_edit_comment: bool = True

    can_delete_all_comment: bool = False
    can_edit_all_comment: bool = False

    can_delete_user: bool = False
    can_edit_user: bool = False

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def storage_keys(cls) -> dict[str, str]:
        """Map snake_case field names to their camelCase storage keys."""
        return {name: _to_camel(name) for name in cls.field_names()}

    def merge(self, patch: Mapping[str, bool | None]) -> "Permissions":
        """Return a copy with only the flags present in ``patch`` overwritten.

        ``patch`` is keyed by field name. ``None`` values and unknown keys
        leave the current flag untouched.
        """
        known = self.field_names()
        changes = {
            name: bool(value)
            for name, value in patch.items()
            if name in known and value is not None
        }
        return replace(self, **changes)

    def to_storage(self) -> dict[str, bool]:
        keys = self.storage_keys()
        return {keys[name]: value for name, value in asdict(self).items()}

    @classmethod
    def from_storage(cls, raw: Any) -> "Permissions":
        """Rebuild permissions from a stored document.

        Anything that is not a mapping, and any flag that is missing or not
        a boolean, falls back to the baseline value so that all 13 flags are
        always present.
        """
        if not isinstance(raw, Mapping):
            return cls()

        values: dict[str, bool] = {}
        for name, key in cls.storage_keys().items():
            value = raw.get(key, raw.get(name))
            if isinstance(value, bool):
                values[name] = value
        return cls(**values)
