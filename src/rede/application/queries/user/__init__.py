from rede.application.queries.user.get_user_query import (
    GetUserByEmailQuery,
    GetUserByIdQuery,
    GetUserByIgnQuery,
)
from rede.application.queries.user.list_users_query import ListUsersQuery

__all__ = [
    "GetUserByEmailQuery",
    "GetUserByIdQuery",
    "GetUserByIgnQuery",
    "ListUsersQuery",
]
