"""Reference taxonomies presented by the job-listing product.

This package re-maps upstream enumerations into the product's ordered
taxonomies and holds the category table used for job URLs.
"""

from .categories import CATEGORY, get_category_by_label
from .ordering import ordered_join
from .reference import (
    COMPANY_ADDRESS_PURPOSES,
    EMPLOYMENT_TYPES_ORDER,
    JOB_APPLICATION_STATUSES,
    POSITION_LEVELS_ORDER,
    SCHEMES,
    CompanyAddressPurpose,
    JobApplicationStatus,
    JobStatus,
    SalaryType,
    SchemeId,
    map_company_registration_types,
    map_countries,
    map_districts,
    map_employment_types,
    map_job_statuses,
    map_position_levels,
    map_salary_types,
    order_job_categories,
)

__all__ = [
    "CATEGORY",
    "COMPANY_ADDRESS_PURPOSES",
    "EMPLOYMENT_TYPES_ORDER",
    "JOB_APPLICATION_STATUSES",
    "POSITION_LEVELS_ORDER",
    "SCHEMES",
    "CompanyAddressPurpose",
    "JobApplicationStatus",
    "JobStatus",
    "SalaryType",
    "SchemeId",
    "get_category_by_label",
    "map_company_registration_types",
    "map_countries",
    "map_districts",
    "map_employment_types",
    "map_job_statuses",
    "map_position_levels",
    "map_salary_types",
    "order_job_categories",
    "ordered_join",
]
