"""
Join Request Use Cases

Request, list and decide company join requests.
"""

from .dtos import (
    HandleJoinRequestResponse,
    JoinRequestResponse,
    ListPendingJoinRequestsResponse,
    PendingJoinRequestInfo,
)
from .handle_join_request_use_case import HandleJoinRequestUseCase
from .list_pending_join_requests_use_case import ListPendingJoinRequestsUseCase
from .request_join_use_case import JOINABLE_ROLES, RequestJoinUseCase

__all__ = [
    "RequestJoinUseCase",
    "ListPendingJoinRequestsUseCase",
    "HandleJoinRequestUseCase",
    "JOINABLE_ROLES",
    "JoinRequestResponse",
    "PendingJoinRequestInfo",
    "ListPendingJoinRequestsResponse",
    "HandleJoinRequestResponse",
]
