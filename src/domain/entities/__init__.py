"""
CRM Access Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    Capability,
    CompanyRole,
    GlobalRole,
    JoinRequestAction,
    JoinRequestStatus,
)

# Export all entities
from .user import User
from .company import Company
from .membership import Membership
from .join_request import JoinRequest
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "Capability",
    "CompanyRole",
    "GlobalRole",
    "JoinRequestAction",
    "JoinRequestStatus",
    # Entities
    "User",
    "Company",
    "Membership",
    "JoinRequest",
    "AuditEvent",
]
