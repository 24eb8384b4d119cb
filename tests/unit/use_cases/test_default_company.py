from uuid import uuid4

from src.app.use_cases.access import suggest_default_company
from src.domain.entities import CompanyRole, Membership


def _membership(is_active=True):
    return Membership(
        user_id=uuid4(), company_id=uuid4(), role=CompanyRole.employee, is_active=is_active
    )


def test_no_memberships():
    assert suggest_default_company([]) is None


def test_remembered_company_wins_when_still_active():
    first, second = _membership(), _membership()
    assert suggest_default_company([first, second], second.company_id) == second.company_id


def test_remembered_company_ignored_when_inactive():
    inactive, active = _membership(is_active=False), _membership()
    assert suggest_default_company([inactive, active], inactive.company_id) == active.company_id


def test_first_active_membership_without_remembered_company():
    inactive, active = _membership(is_active=False), _membership()
    assert suggest_default_company([inactive, active]) == active.company_id


def test_falls_back_to_first_membership():
    first, second = _membership(is_active=False), _membership(is_active=False)
    assert suggest_default_company([first, second]) == first.company_id
