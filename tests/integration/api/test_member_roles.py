from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import AuditEvent, CompanyRole, Membership
from tests.utils.api_helpers import add_member, create_company, sign_in
from tests.utils.identity import auth_headers


@pytest.mark.asyncio
async def test_admin_changes_role(client: AsyncClient, db_session):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    member_id = await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "employee")

    response = await client.put(
        f"/companies/roles/{member_id}",
        json={"role": "manager"},
        headers=auth_headers("owner@acme.com", company_id),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "updated"
    assert data["membership"] == {"user_id": member_id, "role": "manager"}

    result = await db_session.exec(
        select(Membership).where(
            Membership.user_id == UUID(member_id), Membership.company_id == UUID(company_id)
        )
    )
    assert result.one().role == CompanyRole.manager

    result = await db_session.exec(select(AuditEvent).where(AuditEvent.action == "role_changed"))
    events = result.all()
    assert len(events) == 1
    assert events[0].event_metadata["old_role"] == "employee"
    assert events[0].event_metadata["new_role"] == "manager"

    context = await client.get(
        "/companies/context", headers=auth_headers("emp@acme.com", company_id)
    )
    assert context.json()["role"] == "manager"


@pytest.mark.asyncio
async def test_admin_cannot_change_own_role(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    owner_id = (await sign_in(client, "owner@acme.com"))["id"]

    response = await client.put(
        f"/companies/roles/{owner_id}",
        json={"role": "client"},
        headers=auth_headers("owner@acme.com", company_id),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SELF_MODIFICATION_DENIED"


@pytest.mark.asyncio
async def test_employee_cannot_change_own_role(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    member_id = await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "employee")

    response = await client.put(
        f"/companies/roles/{member_id}",
        json={"role": "company_admin"},
        headers=auth_headers("emp@acme.com", company_id),
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SELF_MODIFICATION_DENIED"


@pytest.mark.asyncio
async def test_manager_cannot_change_roles(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    await add_member(client, company_id, "owner@acme.com", "mgr@acme.com", "manager")
    member_id = await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "employee")

    response = await client.put(
        f"/companies/roles/{member_id}",
        json={"role": "manager"},
        headers=auth_headers("mgr@acme.com", company_id),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_invalid_role(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    member_id = await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "employee")

    response = await client.put(
        f"/companies/roles/{member_id}",
        json={"role": "owner"},
        headers=auth_headers("owner@acme.com", company_id),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_role_change_for_non_member_not_found(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    outsider_id = (await sign_in(client, "outsider@globex.com"))["id"]

    response = await client.put(
        f"/companies/roles/{outsider_id}",
        json={"role": "manager"},
        headers=auth_headers("owner@acme.com", company_id),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_removed_member_loses_access(client: AsyncClient, db_session):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    member_id = await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "employee")

    response = await client.delete(
        f"/companies/roles/{member_id}", headers=auth_headers("owner@acme.com", company_id)
    )

    assert response.status_code == 200
    assert response.json()["status"] == "removed"

    result = await db_session.exec(
        select(Membership).where(Membership.user_id == UUID(member_id))
    )
    assert result.one().is_active is False

    members = await client.get(
        "/companies/members", headers=auth_headers("owner@acme.com", company_id)
    )
    assert members.status_code == 200
    assert member_id not in [m["user_id"] for m in members.json()["members"]]

    denied = await client.get(
        "/companies/members", headers=auth_headers("emp@acme.com", company_id)
    )
    assert denied.status_code == 403
    assert denied.json()["error"]["code"] == "NOT_A_MEMBER"


@pytest.mark.asyncio
async def test_admin_cannot_remove_self(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    owner_id = (await sign_in(client, "owner@acme.com"))["id"]

    response = await client.delete(
        f"/companies/roles/{owner_id}", headers=auth_headers("owner@acme.com", company_id)
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SELF_REMOVAL_DENIED"


@pytest.mark.asyncio
async def test_roles_and_permissions_admin_only(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    await add_member(client, company_id, "owner@acme.com", "mgr@acme.com", "manager")

    allowed = await client.get("/companies/roles", headers=auth_headers("owner@acme.com", company_id))
    denied = await client.get("/companies/roles", headers=auth_headers("mgr@acme.com", company_id))

    assert allowed.status_code == 200
    assert allowed.json()["role_permissions"]["employee"]["permissions"]["manageTasks"] is True
    assert denied.status_code == 403
