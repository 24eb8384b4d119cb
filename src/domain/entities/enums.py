"""
CRM Access Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class GlobalRole(str, Enum):
    """Platform-wide role of a user"""

    user = "user"
    super_admin = "super_admin"


class CompanyRole(str, Enum):
    """User role within a company"""

    company_admin = "company_admin"
    manager = "manager"
    employee = "employee"
    client = "client"


class JoinRequestStatus(str, Enum):
    """Join request lifecycle state"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class JoinRequestAction(str, Enum):
    """Decision an admin takes on a pending join request"""

    approve = "approve"
    reject = "reject"


class Capability(str, Enum):
    """Named permission whose value is decided by role only"""

    manage_company = "manageCompany"
    manage_employees = "manageEmployees"
    manage_leads = "manageLeads"
    manage_orders = "manageOrders"
    manage_projects = "manageProjects"
    manage_tasks = "manageTasks"
    manage_roles = "manageRoles"
    view_reports = "viewReports"
    delete_data = "deleteData"
