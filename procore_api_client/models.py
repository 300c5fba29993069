"""Typed records exchanged with the Procore API.

The ``*Detail`` models describe what the API returns; the plain models
are the payloads sent when creating a resource.  Fields the API adds in
future versions are ignored rather than rejected.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ProcoreModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, leaving out unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


class Reference(ProcoreModel):
    """Minimal ``{"id": ..., "name": ...}`` pointer to a related resource."""

    id: int
    name: Optional[str] = None


# ----------------------------------------------------------------------
# Companies
# ----------------------------------------------------------------------
class Company(ProcoreModel):
    id: int
    name: str
    is_active: Optional[bool] = None


# ----------------------------------------------------------------------
# Company users
# ----------------------------------------------------------------------
class CompanyUser(ProcoreModel):
    """Payload for adding a user to a company directory."""

    email_address: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    business_phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country_code: Optional[str] = None
    state_code: Optional[str] = None
    is_active: Optional[bool] = None
    is_employee: Optional[bool] = None
    employee_id: Optional[str] = None
    vendor_id: Optional[int] = None
    permission_template_id: Optional[int] = None
    default_permission_template_id: Optional[int] = None


class CompanyUserDetail(ProcoreModel):
    """A user as listed in a company directory."""

    id: int
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: Optional[str] = None
    job_title: Optional[str] = None
    business_phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country_code: Optional[str] = None
    state_code: Optional[str] = None
    is_active: Optional[bool] = None
    is_employee: Optional[bool] = None
    employee_id: Optional[str] = None
    last_login_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    vendor: Optional[Reference] = None


# ----------------------------------------------------------------------
# Projects
# ----------------------------------------------------------------------
class Project(ProcoreModel):
    """Payload for creating a project."""

    name: str
    project_number: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = None
    country_code: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    active: Optional[bool] = None
    start_date: Optional[str] = None
    completion_date: Optional[str] = None
    total_value: Optional[str] = None


class ProjectDetail(ProcoreModel):
    id: int
    name: Optional[str] = None
    display_name: Optional[str] = None
    project_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = None
    country_code: Optional[str] = None
    zip: Optional[str] = None
    active: Optional[bool] = None
    start_date: Optional[str] = None
    completion_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    company: Optional[Reference] = None


# ----------------------------------------------------------------------
# Vendors
# ----------------------------------------------------------------------
class CompanyVendor(ProcoreModel):
    """Payload for adding a vendor to a company directory."""

    name: str
    abbreviated_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    state_code: Optional[str] = None
    country_code: Optional[str] = None
    business_phone: Optional[str] = None
    email_address: Optional[str] = None
    is_active: Optional[bool] = None
    trade_name: Optional[str] = None
    website: Optional[str] = None


class CompanyVendorDetail(ProcoreModel):
    id: int
    name: Optional[str] = None
    abbreviated_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    state_code: Optional[str] = None
    country_code: Optional[str] = None
    business_phone: Optional[str] = None
    email_address: Optional[str] = None
    is_active: Optional[bool] = None
    trade_name: Optional[str] = None
    website: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
