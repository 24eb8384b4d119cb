from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import JoinRequest, JoinRequestStatus, Membership
from tests.utils.api_helpers import create_company, sign_in
from tests.utils.identity import auth_headers


async def _request_join(client, email, company_id, role="employee"):
    return await client.post(
        "/companies/join",
        json={"company_id": company_id, "role": role},
        headers=auth_headers(email),
    )


async def _handle(client, admin_email, company_id, user_id, action="approve"):
    return await client.post(
        "/companies/join-requests/handle",
        json={"user_id": user_id, "action": action},
        headers=auth_headers(admin_email, company_id),
    )


@pytest.mark.asyncio
async def test_request_waits_for_approval(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    await sign_in(client, "joiner@acme.com")

    response = await _request_join(client, "joiner@acme.com", company_id, "client")

    assert response.status_code == 201
    assert response.json()["status"] == "pending"

    denied = await client.get(
        "/companies/members", headers=auth_headers("joiner@acme.com", company_id)
    )
    assert denied.status_code == 403
    assert denied.json()["error"]["code"] == "NOT_A_MEMBER"

    pending = await client.get(
        "/companies/join-requests", headers=auth_headers("owner@acme.com", company_id)
    )
    assert pending.status_code == 200
    assert [r["email"] for r in pending.json()["requests"]] == ["joiner@acme.com"]


@pytest.mark.asyncio
async def test_approve_grants_requested_role(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    joiner_id = (await sign_in(client, "joiner@acme.com"))["id"]
    await _request_join(client, "joiner@acme.com", company_id, "manager")

    response = await _handle(client, "owner@acme.com", company_id, joiner_id)

    assert response.status_code == 200
    assert response.json() == {"status": "approved", "user_id": joiner_id, "role": "manager"}

    context = await client.get(
        "/companies/context", headers=auth_headers("joiner@acme.com", company_id)
    )
    assert context.status_code == 200
    assert context.json()["role"] == "manager"


@pytest.mark.asyncio
async def test_second_decision_is_rejected_and_grants_nothing(client: AsyncClient, db_session):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    joiner_id = (await sign_in(client, "joiner@acme.com"))["id"]
    await _request_join(client, "joiner@acme.com", company_id)

    first = await _handle(client, "owner@acme.com", company_id, joiner_id)
    second = await _handle(client, "owner@acme.com", company_id, joiner_id)

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "REQUEST_ALREADY_HANDLED"

    result = await db_session.exec(
        select(Membership).where(
            Membership.user_id == UUID(joiner_id), Membership.company_id == UUID(company_id)
        )
    )
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_reject_keeps_user_out(client: AsyncClient, db_session):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    joiner_id = (await sign_in(client, "joiner@acme.com"))["id"]
    await _request_join(client, "joiner@acme.com", company_id)

    response = await _handle(client, "owner@acme.com", company_id, joiner_id, "reject")

    assert response.status_code == 200
    assert response.json()["status"] == "rejected"

    result = await db_session.exec(
        select(JoinRequest).where(JoinRequest.user_id == UUID(joiner_id))
    )
    assert result.one().status == JoinRequestStatus.rejected

    result = await db_session.exec(
        select(Membership).where(Membership.user_id == UUID(joiner_id))
    )
    assert result.all() == []


@pytest.mark.asyncio
async def test_duplicate_pending_request(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    await sign_in(client, "joiner@acme.com")
    await _request_join(client, "joiner@acme.com", company_id)

    response = await _request_join(client, "joiner@acme.com", company_id, "manager")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "JOIN_REQUEST_PENDING"


@pytest.mark.asyncio
async def test_member_cannot_request_again(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")

    response = await _request_join(client, "owner@acme.com", company_id, "manager")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_company_admin_role_cannot_be_requested(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    await sign_in(client, "joiner@acme.com")

    response = await _request_join(client, "joiner@acme.com", company_id, "company_admin")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_unknown_company(client: AsyncClient):
    await sign_in(client, "joiner@acme.com")

    response = await _request_join(
        client, "joiner@acme.com", "00000000-0000-0000-0000-000000000001"
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "COMPANY_NOT_FOUND"


@pytest.mark.asyncio
async def test_handle_without_request_not_found(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    user_id = (await sign_in(client, "nobody@acme.com"))["id"]

    response = await _handle(client, "owner@acme.com", company_id, user_id)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "JOIN_REQUEST_NOT_FOUND"


@pytest.mark.asyncio
async def test_invalid_action(client: AsyncClient):
    company_id = await create_company(client, "owner@acme.com", "Acme")
    user_id = (await sign_in(client, "nobody@acme.com"))["id"]

    response = await _handle(client, "owner@acme.com", company_id, user_id, "ignore")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_ACTION"
