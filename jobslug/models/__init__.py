"""Typed record models for jobslug reference data."""

from .datatypes import (
    Category,
    CompanyRegistrationType,
    Country,
    District,
    EmploymentType,
    JobCategory,
    JobStatusRecord,
    PositionLevel,
    SalaryTypeRecord,
    Scheme,
)

__all__ = [
    "Category",
    "CompanyRegistrationType",
    "Country",
    "District",
    "EmploymentType",
    "JobCategory",
    "JobStatusRecord",
    "PositionLevel",
    "SalaryTypeRecord",
    "Scheme",
]
