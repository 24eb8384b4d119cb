"""
Default company suggestion

Advisory only: used to pre-select a company for the client. The selector
still validates whatever company the client finally sends.
"""

from typing import List, Optional
from uuid import UUID

from src.domain.entities import Membership


def suggest_default_company(
    memberships: List[Membership], remembered_company_id: Optional[UUID] = None
) -> Optional[UUID]:
    """
    Pick the company to pre-select.

    Order of preference: the remembered company if the user is still an active
    member there, the first active membership, the first membership in list order.
    """
    if not memberships:
        return None

    active = [m for m in memberships if m.is_active]

    if remembered_company_id is not None:
        for membership in active:
            if membership.company_id == remembered_company_id:
                return membership.company_id

    if active:
        return active[0].company_id

    return memberships[0].company_id
