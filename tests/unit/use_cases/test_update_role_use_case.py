from uuid import uuid4

import pytest

from src.app.use_cases.members import UpdateRoleUseCase
from src.domain.entities import CompanyRole, Membership
from tests.utils.factories import make_context


def _target(context, role=CompanyRole.employee):
    return Membership(
        id=uuid4(), user_id=uuid4(), company_id=context.company_id, role=role, is_active=True
    )


@pytest.mark.asyncio
async def test_admin_changes_member_role(mock_uow, admin_context):
    target = _target(admin_context)
    mock_uow.memberships.get_active.return_value = target

    use_case = UpdateRoleUseCase(mock_uow)
    result = await use_case.execute(admin_context, target.user_id, "manager")

    assert result.is_ok()
    assert result.value.status == "updated"
    assert result.value.membership.role == CompanyRole.manager
    assert target.role == CompanyRole.manager
    mock_uow.memberships.get_active.assert_called_once_with(
        target.user_id, admin_context.company_id, for_update=True
    )

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "role_changed"
    assert audit.company_id == admin_context.company_id
    assert audit.event_metadata["old_role"] == "employee"
    assert audit.event_metadata["new_role"] == "manager"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", list(CompanyRole))
async def test_nobody_can_change_own_role(mock_uow, role):
    context = make_context(role)

    use_case = UpdateRoleUseCase(mock_uow)
    result = await use_case.execute(context, context.user_id, "client")

    assert result.is_err()
    assert result.error.code == "SELF_MODIFICATION_DENIED"
    mock_uow.memberships.get_active.assert_not_called()


@pytest.mark.asyncio
async def test_super_admin_cannot_change_own_role(mock_uow):
    context = make_context(super_admin=True)

    result = await UpdateRoleUseCase(mock_uow).execute(context, context.user_id, "client")

    assert result.error.code == "SELF_MODIFICATION_DENIED"


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [CompanyRole.manager, CompanyRole.employee, CompanyRole.client])
async def test_non_admin_is_forbidden(mock_uow, role):
    context = make_context(role)

    use_case = UpdateRoleUseCase(mock_uow)
    result = await use_case.execute(context, uuid4(), "manager")

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.memberships.update.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_role_rejected(mock_uow, admin_context):
    use_case = UpdateRoleUseCase(mock_uow)
    result = await use_case.execute(admin_context, uuid4(), "owner")

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_forbidden_checked_before_invalid_role(mock_uow):
    context = make_context(CompanyRole.employee)

    result = await UpdateRoleUseCase(mock_uow).execute(context, uuid4(), "owner")

    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_target_without_active_membership_not_found(mock_uow, admin_context):
    mock_uow.memberships.get_active.return_value = None

    use_case = UpdateRoleUseCase(mock_uow)
    result = await use_case.execute(admin_context, uuid4(), "manager")

    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_NOT_FOUND"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_super_admin_may_change_roles_anywhere(mock_uow):
    context = make_context(super_admin=True)
    target = _target(context, CompanyRole.client)
    mock_uow.memberships.get_active.return_value = target

    result = await UpdateRoleUseCase(mock_uow).execute(context, target.user_id, "employee")

    assert result.is_ok()
    assert target.role == CompanyRole.employee
