from rede.application.queries.user import (
    GetUserByEmailQuery,
    GetUserByIdQuery,
    GetUserByIgnQuery,
    ListUsersQuery,
)

__all__ = [
    "GetUserByEmailQuery",
    "GetUserByIdQuery",
    "GetUserByIgnQuery",
    "ListUsersQuery",
]
