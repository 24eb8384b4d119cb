"""
Company Settings Use Cases

Read and update admin-editable company settings.
"""

import copy
import logging
from typing import Any, Dict, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    authorize_company_admin,
    require_active_company,
)
from src.domain.entities import AuditEvent, Capability, Company

from .dtos import CompanySettingsResponse

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Dict[str, Any]] = {
    "notifications": {
        "emailNotifications": True,
        "orderNotifications": True,
        "leadNotifications": True,
        "taskNotifications": True,
        "projectNotifications": True,
    },
    "features": {
        "enableProjects": True,
        "enableTasks": True,
        "enableOrders": True,
        "enableLeads": True,
    },
    "preferences": {
        "timezone": "UTC",
        "dateFormat": "MM/DD/YYYY",
        "currency": "USD",
    },
}

SETTINGS_SECTIONS = tuple(DEFAULT_SETTINGS.keys())


def _build_response(company: Company) -> CompanySettingsResponse:
    stored = company.settings or {}
    sections = {
        section: stored.get(section) or copy.deepcopy(DEFAULT_SETTINGS[section])
        for section in SETTINGS_SECTIONS
    }
    return CompanySettingsResponse(
        company={
            "name": company.name,
            "domain": company.domain or "",
            "isActive": company.is_active,
        },
        **sections,
    )


class GetCompanySettingsUseCase:
    """Settings of the caller's company, company_admin only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: CallerContext) -> Result[CompanySettingsResponse]:
        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_company)
        if authorized.is_err():
            return authorized

        async with self.uow:
            company = await self.uow.companies.get_by_id(actor.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))
            return Return.ok(_build_response(company))


class UpdateCompanySettingsUseCase:
    """
    Use case for updating company settings.

    Business Rules:
    - Only company_admin (or the super admin) may update
    - Each section given replaces the stored one; omitted sections are kept
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: CallerContext,
        notifications: Optional[Dict[str, Any]] = None,
        features: Optional[Dict[str, Any]] = None,
        preferences: Optional[Dict[str, Any]] = None,
    ) -> Result[CompanySettingsResponse]:
        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_company)
        if authorized.is_err():
            return authorized

        changes = {
            "notifications": notifications,
            "features": features,
            "preferences": preferences,
        }
        changes = {k: v for k, v in changes.items() if v is not None}

        async with self.uow:
            company = await self.uow.companies.get_by_id(actor.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            # JSON column: assign a new dict so the change is tracked
            settings = dict(company.settings or {})
            settings.update(changes)
            company.settings = settings
            await self.uow.companies.update(company)

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=actor.company_id,
                    user_id=actor.user_id,
                    action="settings_updated",
                    event_metadata={"sections": sorted(changes.keys())},
                )
            )

            response = _build_response(company)
            await self.uow.commit()

            logger.info(f"User {actor.user_id} updated settings of company {actor.company_id}")

            return Return.ok(response)
