from uuid import uuid4

import pytest

from src.app.use_cases.access import SelectActiveCompanyUseCase
from src.domain.entities import Company, CompanyRole, GlobalRole, Membership
from tests.utils.factories import make_user


def _membership(user_id, company_id=None, role=CompanyRole.employee, is_active=True):
    return Membership(
        id=uuid4(),
        user_id=user_id,
        company_id=company_id or uuid4(),
        role=role,
        is_active=is_active,
    )


@pytest.mark.asyncio
async def test_explicit_company_resolves_membership_role(mock_uow):
    user = make_user()
    company_id = uuid4()
    mock_uow.memberships.get_active.return_value = _membership(
        user.id, company_id, CompanyRole.manager
    )
    mock_uow.companies.get_by_id.return_value = Company(
        id=company_id, name="Acme", admin_id=uuid4(), is_active=True
    )

    result = await SelectActiveCompanyUseCase(mock_uow).execute(user, company_id)

    assert result.is_ok()
    assert result.value.company_id == company_id
    assert result.value.role == CompanyRole.manager
    assert result.value.user_id == user.id


@pytest.mark.asyncio
async def test_explicit_company_without_active_membership_is_not_a_member(mock_uow):
    user = make_user()
    mock_uow.memberships.get_active.return_value = None

    result = await SelectActiveCompanyUseCase(mock_uow).execute(user, uuid4())

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"
    assert result.error.message == "Access denied. You are not a member of this company."


@pytest.mark.asyncio
async def test_single_active_membership_used_without_company_id(mock_uow):
    user = make_user()
    membership = _membership(user.id, role=CompanyRole.client)
    mock_uow.memberships.get_active_by_user_id.return_value = [membership]

    result = await SelectActiveCompanyUseCase(mock_uow).execute(user, None)

    assert result.is_ok()
    assert result.value.company_id == membership.company_id
    assert result.value.role == CompanyRole.client


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 2])
async def test_zero_or_several_memberships_require_a_choice(mock_uow, count):
    user = make_user()
    mock_uow.memberships.get_active_by_user_id.return_value = [
        _membership(user.id) for _ in range(count)
    ]

    result = await SelectActiveCompanyUseCase(mock_uow).execute(user, None)

    assert result.is_err()
    assert result.error.code == "NO_ACTIVE_COMPANY"
    assert result.error.message == "Select a company first"


@pytest.mark.asyncio
async def test_super_admin_gets_admin_context_without_lookup(mock_uow):
    user = make_user(email="root@crm.io", global_role=GlobalRole.super_admin)
    company_id = uuid4()

    result = await SelectActiveCompanyUseCase(mock_uow).execute(user, company_id)

    assert result.is_ok()
    assert result.value.is_super_admin is True
    assert result.value.role == CompanyRole.company_admin
    assert result.value.company_id == company_id
    mock_uow.memberships.get_active.assert_not_called()


@pytest.mark.asyncio
async def test_membership_in_deactivated_company_grants_no_access(mock_uow):
    user = make_user()
    company_id = uuid4()
    mock_uow.memberships.get_active.return_value = _membership(
        user.id, company_id, CompanyRole.company_admin
    )
    mock_uow.companies.get_by_id.return_value = Company(
        id=company_id, name="Acme", admin_id=user.id, is_active=False
    )

    result = await SelectActiveCompanyUseCase(mock_uow).execute(user, company_id)

    assert result.is_err()
    assert result.error.code == "COMPANY_INACTIVE"
    mock_uow.companies.get_by_id.assert_called_once_with(company_id)
