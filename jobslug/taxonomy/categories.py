"""Product job categories and their listing URLs.

Responsibilities:
- Define the category table used to build category-scoped job URLs.
- Resolve category keys from the human-readable labels found in job data.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models.datatypes import Category


def _category(category_id: str, label: str, url: str) -> Category:
    """Build a category whose filter value is its label."""

    return Category(id=category_id, label=label, value=label, url=url)


CATEGORY: Mapping[str, Category] = MappingProxyType(
    {
        "ACCOUNTING_AUDITING_TAXATION": _category(
            "accounting_auditing_taxation",
            "Accounting / Auditing / Taxation",
            "accounting",
        ),
        "ADMIN_SECRETARIAL": _category("admin_secretarial", "Admin / Secretarial", "admin"),
        "ADVERTISING_MEDIA": _category("advertising_media", "Advertising / Media", "advertising"),
        "ARCHITECTURE_INTERIOR_DESIGN": _category(
            "architecture_interior_design",
            "Architecture / Interior Design",
            "architecture",
        ),
        "BANKING_AND_FINANCE": _category(
            "banking_finance",
            "Banking and Finance",
            "banking-finance",
        ),
        "BUILDING_AND_CONSTRUCTION": _category(
            "building_construction",
            "Building and Construction",
            "building-construction",
        ),
        "CONSULTING": _category("consulting", "Consulting", "consulting"),
        "CUSTOMER_SERVICE": _category("customer_service", "Customer Service", "customer-service"),
        "DESIGN": _category("design", "Design", "design"),
        "EDUCATION_AND_TRAINING": _category(
            "education_training",
            "Education and Training",
            "education-training",
        ),
        "ENGINEERING": _category("engineering", "Engineering", "engineering"),
        "ENTERTAINMENT": _category("entertainment", "Entertainment", "entertainment"),
        "ENVIRONMENT_HEALTH": _category(
            "environment_health",
            "Environment / Health",
            "environment",
        ),
        "EVENTS_PROMOTIONS": _category("events_promotions", "Events / Promotions", "events"),
        "F_N_B": _category("f_n_b", "F&B", "food-and-beverage"),
        "GENERAL_MANAGEMENT": _category(
            "general_management",
            "General Management",
            "general-management",
        ),
        "GENERAL_WORK": _category("general_work", "General Work", "general-work"),
        "HEALTHCARE_PHARMACEUTICAL": _category(
            "healthcare_pharmaceutical",
            "Healthcare / Pharmaceutical",
            "healthcare",
        ),
        "HOSPITALITY": _category("hospitality", "Hospitality", "hospitality"),
        "HUMAN_RESOURCES": _category("human_resources", "Human Resources", "human-resources"),
        "INFORMATION_TECHNOLOGY": _category(
            "information_technology",
            "Information Technology",
            "information-technology",
        ),
        "INSURANCE": _category("insurance", "Insurance", "insurance"),
        "LEGAL": _category("legal", "Legal", "legal"),
        "LOGISTICS_SUPPLY_CHAIN": _category(
            "logistics_supply_chain",
            "Logistics / Supply Chain",
            "logistics",
        ),
        "MANUFACTURING": _category("manufacturing", "Manufacturing", "manufacturing"),
        "MARKETING_PUBLIC_RELATIONS": _category(
            "marketing_public_relations",
            "Marketing / Public Relations",
            "marketing",
        ),
        "MEDICAL_THERAPY_SERVICES": _category(
            "medical_therapy_services",
            "Medical / Therapy Services",
            "medical",
        ),
        "PERSONAL_CARE_BEAUTY": _category(
            "personal_care_beauty",
            "Personal Care / Beauty",
            "personal-care",
        ),
        "PROFESSIONAL_SERVICES": _category(
            "professional_services",
            "Professional Services",
            "professional-services",
        ),
        "PUBLIC_CIVIL_SERVICES": _category(
            "public_civil_service",
            "Public / Civil Service",
            "public",
        ),
        "PURCHASING_MERCHANDISING": _category(
            "purchasing_merchandising",
            "Purchasing / Merchandising",
            "purchasing",
        ),
        "REAL_ESTATE_PROPERTY_MANAGEMENT": _category(
            "real_estate_property_management",
            "Real Estate / Property Management",
            "real-estate",
        ),
        "REPAIR_MAINTENANCE": _category(
            "repair_maintenance",
            "Repair and Maintenance",
            "repair-maintenance",
        ),
        "RISK_MANAGEMENT": _category("risk_management", "Risk Management", "risk-management"),
        "SALES_RETAIL": _category("sales_retail", "Sales / Retail", "sales"),
        "SCIENCES_LABORATORY_R_N_D": _category(
            "sciences_laboratory_r_n_d",
            "Sciences / Laboratory / R&D",
            "sciences",
        ),
        "SECURITY_AND_INVESTIGATION": _category(
            "security_investigation",
            "Security and Investigation",
            "security",
        ),
        "SOCIAL_SERVICES": _category("social_services", "Social Services", "social-services"),
        "TELECOMMUNICATIONS": _category(
            "telecommunications",
            "Telecommunications",
            "telecommunications",
        ),
        "TRAVEL_TOURISM": _category("travel_tourism", "Travel / Tourism", "travel"),
        "OTHERS": _category("others", "Others", "others"),
    }
)


def get_category_by_label(label: str | None) -> str | None:
    """Return the `CATEGORY` key whose label equals `label`, if any."""

    if label is None:
        return None
    return next((key for key, category in CATEGORY.items() if category.label == label), None)
