from rede.presentation.api.schemas.common import ErrorResponse, FieldErrorResponse
from rede.presentation.api.schemas.users import PermissionsResponse, UserResponse

__all__ = [
    "ErrorResponse",
    "FieldErrorResponse",
    "PermissionsResponse",
    "UserResponse",
]
