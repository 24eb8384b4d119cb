from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.entities import CompanyRole
from tests.utils.factories import make_context


def _repository(*methods):
    repo = MagicMock()
    for method in methods:
        setattr(repo, method, AsyncMock())
    return repo


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository(
        "get_by_email",
        "get_by_id",
        "get_by_subject_id",
        "get_by_ids",
        "list_all",
        "create",
        "update",
    )
    uow.users.get_by_email.return_value = None
    uow.users.create.side_effect = lambda user: user
    uow.users.update.side_effect = lambda user: user

    uow.companies = _repository(
        "get_by_id", "get_by_name", "get_by_ids", "list_all", "create", "update"
    )
    uow.companies.create.side_effect = lambda company: company
    uow.companies.update.side_effect = lambda company: company

    uow.memberships = _repository(
        "get_active",
        "get_by_user_id",
        "get_active_by_user_id",
        "list_active_members",
        "get_active_by_user_ids",
        "count_active_by_company_ids",
        "create",
        "update",
    )
    uow.memberships.create.side_effect = lambda membership: membership
    uow.memberships.update.side_effect = lambda membership: membership

    uow.join_requests = _repository(
        "get_latest", "get_pending", "list_pending_by_company", "create", "mark_handled"
    )
    uow.join_requests.create.side_effect = lambda join_request: join_request

    uow.audit_events = _repository("create", "get_by_company_paginated")
    return uow


@pytest.fixture
def admin_context():
    """Caller context of a company_admin in a fresh company"""
    return make_context(CompanyRole.company_admin)
