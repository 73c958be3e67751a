from rede.application.commands.user import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
