from typing import Union

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Errors any company-scoped request can end with, before its own use case runs
ACCESS_ERROR_STATUS = {
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "IDENTITY_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "NO_ACTIVE_COMPANY": status.HTTP_400_BAD_REQUEST,
    "INVALID_COMPANY_ID": status.HTTP_400_BAD_REQUEST,
    "NOT_A_MEMBER": status.HTTP_403_FORBIDDEN,
    "COMPANY_INACTIVE": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "USER_DISABLED": status.HTTP_403_FORBIDDEN,
    "EMAIL_ALREADY_LINKED": status.HTTP_409_CONFLICT,
}


def access_error(error: Error) -> Union[ClientError, ServerError]:
    status_code = ACCESS_ERROR_STATUS.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
