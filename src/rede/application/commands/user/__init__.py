from rede.application.commands.user.create_user_command import CreateUserCommand
from rede.application.commands.user.delete_user_command import DeleteUserCommand
from rede.application.commands.user.update_user_command import UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
