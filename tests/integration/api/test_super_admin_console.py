import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from tests.utils.api_helpers import add_member, create_company, sign_in
from tests.utils.identity import auth_headers

SUPER_ADMIN_EMAIL = ApplicationConfig.SUPER_ADMIN_EMAIL


@pytest.mark.asyncio
async def test_deactivated_user_is_refused_until_reactivated(client: AsyncClient):
    await sign_in(client, SUPER_ADMIN_EMAIL)
    user_id = (await sign_in(client, "jane@acme.com"))["id"]

    response = await client.post(
        f"/admin/users/{user_id}/deactivate", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )
    assert response.status_code == 200
    assert response.json() == {"user_id": user_id, "is_active": False}

    refused = await client.post("/auth/login", headers=auth_headers("jane@acme.com"))
    assert refused.status_code == 403
    assert refused.json()["error"]["code"] == "USER_DISABLED"

    response = await client.post(
        f"/admin/users/{user_id}/reactivate", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )
    assert response.status_code == 200

    again = await client.post("/auth/login", headers=auth_headers("jane@acme.com"))
    assert again.status_code == 200


@pytest.mark.asyncio
async def test_console_requires_super_admin(client: AsyncClient):
    user_id = (await sign_in(client, "jane@acme.com"))["id"]

    response = await client.post(
        f"/admin/users/{user_id}/deactivate", headers=auth_headers("jane@acme.com")
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_super_admin_cannot_deactivate_self(client: AsyncClient):
    admin_id = (await sign_in(client, SUPER_ADMIN_EMAIL))["id"]

    response = await client.post(
        f"/admin/users/{admin_id}/deactivate", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SELF_DEACTIVATION_DENIED"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_deactivated_company_refuses_its_members_until_reactivated(client: AsyncClient):
    await sign_in(client, SUPER_ADMIN_EMAIL)
    company_id = await create_company(client, "owner@acme.com", "Acme")
    await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "employee")

    response = await client.post(
        f"/admin/companies/{company_id}/deactivate", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )
    assert response.status_code == 200
    assert response.json() == {"company_id": company_id, "name": "Acme", "is_active": False}

    explicit = await client.get(
        "/companies/members", headers=auth_headers("owner@acme.com", company_id)
    )
    assert explicit.status_code == 403
    assert explicit.json()["error"]["code"] == "COMPANY_INACTIVE"

    implicit = await client.get("/companies/members", headers=auth_headers("emp@acme.com"))
    assert implicit.status_code == 400
    assert implicit.json()["error"]["code"] == "NO_ACTIVE_COMPANY"

    switch = await client.post(
        "/companies/switch", json={"company_id": company_id}, headers=auth_headers("emp@acme.com")
    )
    assert switch.status_code == 403
    assert switch.json()["error"]["code"] == "COMPANY_INACTIVE"

    join = await client.post(
        "/companies/join",
        json={"company_id": company_id, "role": "client"},
        headers=auth_headers("new@acme.com"),
    )
    assert join.status_code == 404

    response = await client.post(
        f"/admin/companies/{company_id}/reactivate", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )
    assert response.status_code == 200

    restored = await client.get(
        "/companies/members", headers=auth_headers("emp@acme.com", company_id)
    )
    assert restored.status_code == 200


@pytest.mark.asyncio
async def test_console_lists_users_and_companies(client: AsyncClient):
    await sign_in(client, SUPER_ADMIN_EMAIL)
    company_id = await create_company(client, "owner@acme.com", "Acme")
    emp_id = await add_member(client, company_id, "owner@acme.com", "emp@acme.com", "manager")
    await client.post(
        f"/admin/users/{emp_id}/deactivate", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )

    users = await client.get("/admin/users", headers=auth_headers(SUPER_ADMIN_EMAIL))
    assert users.status_code == 200
    by_email = {u["email"]: u for u in users.json()["users"]}
    assert "emp@acme.com" not in by_email
    assert by_email["owner@acme.com"]["companies"][0]["company_name"] == "Acme"
    assert by_email["owner@acme.com"]["companies"][0]["role"] == "company_admin"

    everyone = await client.get(
        "/admin/users?include_inactive=true", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )
    assert "emp@acme.com" in [u["email"] for u in everyone.json()["users"]]

    companies = await client.get("/admin/companies", headers=auth_headers(SUPER_ADMIN_EMAIL))
    assert companies.status_code == 200
    [acme] = companies.json()["companies"]
    assert acme["id"] == company_id
    assert acme["admin"]["email"] == "owner@acme.com"
    assert acme["member_count"] == 1

    details = await client.get(
        f"/admin/companies/{company_id}", headers=auth_headers(SUPER_ADMIN_EMAIL)
    )
    assert details.status_code == 200
    # Deactivated users are left out of the member list
    assert [m["email"] for m in details.json()["members"]] == ["owner@acme.com"]


@pytest.mark.asyncio
async def test_console_reads_require_super_admin(client: AsyncClient):
    await sign_in(client, "jane@acme.com")

    for path in ["/admin/users", "/admin/companies"]:
        response = await client.get(path, headers=auth_headers("jane@acme.com"))
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_company_details_unknown_company(client: AsyncClient):
    await sign_in(client, SUPER_ADMIN_EMAIL)

    response = await client.get(
        "/admin/companies/00000000-0000-0000-0000-000000000000",
        headers=auth_headers(SUPER_ADMIN_EMAIL),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "COMPANY_NOT_FOUND"
