from uuid import uuid4

import pytest

from src.app.use_cases.companies import (
    DEFAULT_SETTINGS,
    CreateCompanyUseCase,
    GetCompanySettingsUseCase,
    ListMyCompaniesUseCase,
    SwitchCompanyUseCase,
    UpdateCompanySettingsUseCase,
)
from src.domain.entities import Company, CompanyRole, Membership, User
from tests.utils.factories import make_context, make_user


def _company(name="Acme", settings=None):
    return Company(id=uuid4(), name=name, admin_id=uuid4(), settings=settings)


@pytest.mark.asyncio
async def test_create_company_makes_creator_admin(mock_uow):
    user_id = uuid4()
    mock_uow.companies.get_by_name.return_value = None

    result = await CreateCompanyUseCase(mock_uow).execute(user_id, "  Acme  ", "acme.com")

    assert result.is_ok()
    assert result.value.company.name == "Acme"
    assert result.value.company.role == CompanyRole.company_admin

    company = mock_uow.companies.create.call_args.args[0]
    assert company.admin_id == user_id
    membership = mock_uow.memberships.create.call_args.args[0]
    assert membership.user_id == user_id
    assert membership.company_id == company.id
    assert membership.role == CompanyRole.company_admin
    assert mock_uow.audit_events.create.call_args.args[0].action == "company_created"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_company_name_taken(mock_uow):
    mock_uow.companies.get_by_name.return_value = _company()

    result = await CreateCompanyUseCase(mock_uow).execute(uuid4(), "Acme")

    assert result.is_err()
    assert result.error.code == "COMPANY_NAME_TAKEN"
    mock_uow.companies.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_company_requires_name(mock_uow):
    result = await CreateCompanyUseCase(mock_uow).execute(uuid4(), "   ")

    assert result.is_err()
    assert result.error.code == "INVALID_COMPANY_NAME"


@pytest.mark.asyncio
async def test_list_my_companies_with_default(mock_uow):
    acme, globex, initech = _company("Acme"), _company("Globex"), _company("Initech")
    user = make_user(last_active_company_id=globex.id)
    mock_uow.memberships.get_by_user_id.return_value = [
        Membership(user_id=user.id, company_id=acme.id, role=CompanyRole.client),
        Membership(user_id=user.id, company_id=globex.id, role=CompanyRole.manager),
        Membership(
            user_id=user.id, company_id=initech.id, role=CompanyRole.employee, is_active=False
        ),
    ]
    mock_uow.companies.get_by_ids.return_value = [acme, globex, initech]

    result = await ListMyCompaniesUseCase(mock_uow).execute(user)

    assert result.is_ok()
    assert [c.name for c in result.value.companies] == ["Acme", "Globex"]
    assert result.value.default_company_id == str(globex.id)


@pytest.mark.asyncio
async def test_list_my_companies_empty(mock_uow):
    mock_uow.memberships.get_by_user_id.return_value = []
    mock_uow.companies.get_by_ids.return_value = []

    result = await ListMyCompaniesUseCase(mock_uow).execute(make_user())

    assert result.value.companies == []
    assert result.value.default_company_id is None


@pytest.mark.asyncio
async def test_switch_company_remembers_choice(mock_uow):
    company = _company()
    user = make_user()
    db_user = User(id=user.id, subject_id=user.subject_id, email=user.email)
    mock_uow.memberships.get_active.return_value = Membership(
        user_id=user.id, company_id=company.id, role=CompanyRole.employee
    )
    mock_uow.companies.get_by_id.return_value = company
    mock_uow.users.get_by_id.return_value = db_user

    result = await SwitchCompanyUseCase(mock_uow).execute(user, company.id)

    assert result.is_ok()
    assert result.value.company.role == CompanyRole.employee
    assert db_user.last_active_company_id == company.id
    assert mock_uow.audit_events.create.call_args.args[0].action == "company_switch"


@pytest.mark.asyncio
async def test_switch_company_requires_membership(mock_uow):
    mock_uow.memberships.get_active.return_value = None

    result = await SwitchCompanyUseCase(mock_uow).execute(make_user(), uuid4())

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_settings_default_values(mock_uow, admin_context):
    mock_uow.companies.get_by_id.return_value = _company()

    result = await GetCompanySettingsUseCase(mock_uow).execute(admin_context)

    assert result.is_ok()
    assert result.value.company["name"] == "Acme"
    assert result.value.notifications == DEFAULT_SETTINGS["notifications"]
    assert result.value.preferences["currency"] == "USD"


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [CompanyRole.manager, CompanyRole.employee, CompanyRole.client])
async def test_settings_company_admin_only(mock_uow, role):
    context = make_context(role)

    read = await GetCompanySettingsUseCase(mock_uow).execute(context)
    write = await UpdateCompanySettingsUseCase(mock_uow).execute(
        context, preferences={"currency": "EUR"}
    )

    assert read.error.code == "FORBIDDEN"
    assert write.error.code == "FORBIDDEN"
    mock_uow.companies.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_settings_keeps_omitted_sections(mock_uow, admin_context):
    company = _company(settings={"features": {"enableProjects": False}})
    mock_uow.companies.get_by_id.return_value = company

    result = await UpdateCompanySettingsUseCase(mock_uow).execute(
        admin_context, preferences={"timezone": "Europe/Berlin"}
    )

    assert result.is_ok()
    assert result.value.preferences == {"timezone": "Europe/Berlin"}
    assert result.value.features == {"enableProjects": False}
    assert company.settings["preferences"] == {"timezone": "Europe/Berlin"}
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "settings_updated"
    assert audit.event_metadata["sections"] == ["preferences"]
    mock_uow.commit.assert_called_once()
