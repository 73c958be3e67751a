from rede.application.dtos.user_inputs import (
    CreateUserInput,
    ListUsersParams,
    PermissionsInput,
    PermissionsPatch,
    UpdateUserInput,
)

__all__ = [
    "CreateUserInput",
    "ListUsersParams",
    "PermissionsInput",
    "PermissionsPatch",
    "UpdateUserInput",
]
