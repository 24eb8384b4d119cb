"""
Super-admin rule

Exactly one configured email may hold the super_admin global role. The rule
is re-applied on every login and on every user write.
"""

import logging
from typing import Optional

from src.domain.entities.enums import GlobalRole
from src.domain.entities.user import User

security_logger = logging.getLogger("security")


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def is_super_admin_email(email: Optional[str], super_admin_email: Optional[str]) -> bool:
    """Case-insensitive, whitespace-trimmed comparison against the configured email"""
    normalized = normalize_email(email)
    configured = normalize_email(super_admin_email)
    if not normalized or not configured:
        return False
    return normalized == configured


def global_role_for(email: Optional[str], super_admin_email: Optional[str]) -> GlobalRole:
    if is_super_admin_email(email, super_admin_email):
        return GlobalRole.super_admin
    return GlobalRole.user


def enforce_super_admin_rule(user: User, super_admin_email: Optional[str]) -> bool:
    """
    Revert an unauthorized super_admin role before the user is persisted.

    Returns:
        True if the user was reverted to the plain user role
    """
    if user.global_role == GlobalRole.super_admin and not is_super_admin_email(
        user.email, super_admin_email
    ):
        security_logger.error(
            f"SECURITY: unauthorized super_admin role for {user.email} reverted to user"
        )
        user.global_role = GlobalRole.user
        return True
    return False
