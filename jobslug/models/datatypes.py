"""Reference-data records shared across jobslug modules.

Responsibilities:
- Represent immutable product taxonomy entries.
- Provide explicit typing for lookup tables built at import time.

Key types:
- `EmploymentType`, `PositionLevel`, `JobCategory`, `Category`, `District`,
  `Country`, `Scheme`, and `SalaryTypeRecord`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmploymentType:
    """Employment type offered by a job posting.

    Attributes:
        id: Upstream numeric identifier.
        employment_type: Product display name.
    """

    id: int
    employment_type: str


@dataclass(frozen=True, slots=True)
class PositionLevel:
    """Seniority level of a job posting.

    Attributes:
        id: Upstream job level code.
        position: Product display name.
    """

    id: int
    position: str


@dataclass(frozen=True, slots=True)
class JobCategory:
    """Upstream job category entry."""

    id: int
    category: str


@dataclass(frozen=True, slots=True)
class Category:
    """Product job category used to build category URLs.

    Attributes:
        id: Stable snake_case identifier.
        label: Human-readable label, matched against job data.
        value: Filter value; equals `id` when the source omits it.
        url: URL path segment for the category listing.
    """

    id: str
    label: str
    value: str
    url: str


@dataclass(frozen=True, slots=True)
class District:
    """Postal district with its region and sector prefixes.

    Attributes:
        id: Upstream district number.
        location: District location description.
        region: Region name, falling back to the location.
        sectors: Two-digit postal sector prefixes.
    """

    id: int
    location: str
    region: str
    sectors: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Country:
    """Country with its international calling code."""

    code: str
    description: str
    code_number: int


@dataclass(frozen=True, slots=True)
class Scheme:
    """Government hiring scheme attached to job postings."""

    id: int
    scheme: str
    start_date: str
    expiry_date: str
    link: str


@dataclass(frozen=True, slots=True)
class SalaryTypeRecord:
    """Salary period type."""

    id: int
    salary_type: str


@dataclass(frozen=True, slots=True)
class JobStatusRecord:
    """Job posting status with its display label."""

    id: int
    status: str


@dataclass(frozen=True, slots=True)
class CompanyRegistrationType:
    """Company registration type, e.g. local company or business."""

    id: int
    registration_type: str
