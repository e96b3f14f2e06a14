"""Product reference taxonomies derived from upstream ministry data.

Responsibilities:
- Re-map upstream enumerations (employment types, position levels, job
  categories, districts, countries, salary types, job statuses and company
  registration types) into product records.
- Apply the fixed display order and label renames the product UI expects.
- Hold the small literal enumerations shared by job and application records.

Upstream records are plain mappings using the upstream field names
(`ilpId`, `jobLevelCode`, `countryCode`, ...). Mapper functions are pure and
return new lists; records that cannot be resolved are dropped.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Iterable, Mapping

from ..models.datatypes import (
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
from .ordering import ordered_join


UpstreamRecord = Mapping[str, object]


class SchemeId(IntEnum):
    """Government hiring scheme identifiers."""

    P_MAX = 1
    PCP = 2
    CAREER_TRIAL = 3
    CAREER_SUPPORT = 4


class JobStatus(IntEnum):
    """Lifecycle status of a job posting."""

    CLOSED = 1
    DRAFT = 2
    OPEN = 3
    REOPEN = 4


class SalaryType(IntEnum):
    """Salary period identifiers."""

    MONTHLY = 4
    ANNUAL = 5


class CompanyAddressPurpose(IntEnum):
    """Purpose of a registered company address."""

    REGISTERED = 0
    OPERATING = 1
    CORRESPONDENCE = 2


class JobApplicationStatus(IntEnum):
    """Status of a candidate's job application."""

    NOT_SENT = 0
    UNDER_REVIEW = 1
    SUCCESSFUL = 2
    UNSUCCESSFUL = 3
    RECEIVED = 4
    WITHDRAWN = 5


JOB_APPLICATION_STATUSES: Mapping[JobApplicationStatus, str] = MappingProxyType(
    {
        JobApplicationStatus.NOT_SENT: "Not Sent",
        JobApplicationStatus.UNDER_REVIEW: "Under Review",
        JobApplicationStatus.SUCCESSFUL: "Successful",
        JobApplicationStatus.UNSUCCESSFUL: "Unsuccessful",
        JobApplicationStatus.RECEIVED: "Received",
        JobApplicationStatus.WITHDRAWN: "Withdrawn",
    }
)

COMPANY_ADDRESS_PURPOSES: Mapping[CompanyAddressPurpose, str] = MappingProxyType(
    {purpose: purpose.name.lower() for purpose in CompanyAddressPurpose}
)

_SCHEME_LINK_BASE = "http://www.wsg.gov.sg/programmes-and-initiatives"

SCHEMES: tuple[Scheme, ...] = (
    Scheme(
        id=SchemeId.P_MAX,
        scheme="P-Max",
        start_date="1977-05-25",
        expiry_date="2055-05-04",
        link=f"{_SCHEME_LINK_BASE}/p-max-employer.html",
    ),
    Scheme(
        id=SchemeId.PCP,
        scheme="Professional Conversion Programme",
        start_date="1977-05-25",
        expiry_date="2055-05-04",
        link=f"{_SCHEME_LINK_BASE}/professional-conversion-programmes-employers.html",
    ),
    Scheme(
        id=SchemeId.CAREER_TRIAL,
        scheme="Career Trial",
        start_date="1977-05-25",
        expiry_date="2055-05-04",
        link=f"{_SCHEME_LINK_BASE}/career-trial-employers.html",
    ),
    Scheme(
        id=SchemeId.CAREER_SUPPORT,
        scheme="Career Support Programme",
        start_date="1977-05-25",
        expiry_date="2055-05-04",
        link=f"{_SCHEME_LINK_BASE}/wsg-career-support-programme-employers.html",
    ),
)

EMPLOYMENT_TYPES_ORDER: tuple[str, ...] = (
    "Permanent",
    "Full Time",
    "Part Time",
    "Contract",
    "Flexi-work",
    "Temporary",
    "Freelance",
    "Internship",
)

POSITION_LEVELS_ORDER: tuple[str, ...] = (
    "Senior Management",
    "Middle Management",
    "Manager",
    "Professional",
    "Senior Executive",
    "Executive",
    "Junior Executive",
    "Non-executive",
    "Fresh/entry level",
)

_EMPLOYMENT_TYPE_RENAMES = MappingProxyType(
    {"Flexi Work": "Flexi-work", "Contract Basis": "Contract"}
)
_POSITION_LEVEL_RENAMES = MappingProxyType({"Fresh / Entry level": "Fresh/entry level"})

_OTHERS_CATEGORY = "Others"
_DISTRICTS_WITHOUT_SECTORS = frozenset({998, 999})

# Upstream calling codes that are missing or wrong for these country codes.
_COUNTRY_CODE_NUMBER_CORRECTIONS: Mapping[str, int] = MappingProxyType(
    {
        "AI": 1,
        "IO": 246,
        "CX": 61,
        "CC": 61,
        "TP": 670,
        "GK": 44,
        "HK": 852,
        "MM": 44,
        "JM": 1,
        "KV": 383,
        "MO": 853,
        "ME": 262,
        "BU": 95,
        "PB": 970,
        "PN": 64,
        "RF": 7,
        "TI": 992,
        "US": 1,
        "VA": 39,
        "WK": 1,
        "ZR": 243,
    }
)


def _parse_int(value: object) -> int | None:
    """Parse an upstream numeric field, returning `None` for invalid values."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _text(value: object) -> str:
    """Return an upstream text field, mapping `None` to an empty string."""

    return "" if value is None else str(value)


def map_employment_types(upstream: Iterable[UpstreamRecord]) -> list[EmploymentType]:
    """Map upstream employment types into product order and naming.

    Args:
        upstream: Records with `ilpId` (numeric string) and `ilpDescription`.

    Returns:
        Employment types ordered by `EMPLOYMENT_TYPES_ORDER`. The first record
        carrying a name decides that name; when its id is unparseable or zero,
        or the name is blank, the name is dropped even if a later record for
        it is valid.
    """

    candidates = []
    for record in upstream:
        description = _text(record.get("ilpDescription"))
        name = _EMPLOYMENT_TYPE_RENAMES.get(description, description)
        candidates.append((_parse_int(record.get("ilpId")), name))
    joined = ordered_join(EMPLOYMENT_TYPES_ORDER, candidates, lambda item: item[1])
    return [
        EmploymentType(id=employment_id, employment_type=name)
        for employment_id, name in joined
        if employment_id and name
    ]


def map_position_levels(upstream: Iterable[UpstreamRecord]) -> list[PositionLevel]:
    """Map upstream position levels into product order and naming."""

    candidates = []
    for record in upstream:
        description = _text(record.get("description"))
        name = _POSITION_LEVEL_RENAMES.get(description, description)
        candidates.append((_parse_int(record.get("jobLevelCode")), name))
    joined = ordered_join(POSITION_LEVELS_ORDER, candidates, lambda item: item[1])
    return [
        PositionLevel(id=level_code, position=name)
        for level_code, name in joined
        if level_code and name
    ]


def order_job_categories(upstream: Iterable[UpstreamRecord]) -> list[JobCategory]:
    """Sort upstream job categories by name, keeping `Others` last."""

    categories = [
        JobCategory(
            id=_parse_int(record.get("jobCategoryId")) or 0,
            category=_text(record.get("jobCategoryName")),
        )
        for record in upstream
    ]
    named = sorted(
        (item for item in categories if item.category != _OTHERS_CATEGORY),
        key=lambda item: (item.category.casefold(), item.category),
    )
    others = next((item for item in categories if item.category == _OTHERS_CATEGORY), None)
    return named + ([others] if others is not None else [])


def map_districts(
    upstream: Iterable[UpstreamRecord],
    regions: Mapping[int, str] | None = None,
) -> list[District]:
    """Map upstream districts, splitting comma-separated postal sectors.

    Args:
        upstream: Records with `district`, `location` and `sector` fields.
        regions: Optional district-number to region lookup. Districts missing
            from it use their location as region.
    """

    region_lookup = regions or {}
    districts: list[District] = []
    for record in upstream:
        district_id = _parse_int(record.get("district")) or 0
        location = _text(record.get("location"))
        if district_id in _DISTRICTS_WITHOUT_SECTORS:
            sectors: tuple[str, ...] = ()
        else:
            sectors = tuple(sector.strip() for sector in _text(record.get("sector")).split(","))
        districts.append(
            District(
                id=district_id,
                location=location,
                region=region_lookup.get(district_id, location),
                sectors=sectors,
            )
        )
    return districts


def map_countries(upstream: Iterable[UpstreamRecord]) -> list[Country]:
    """Map upstream countries, applying calling-code corrections."""

    countries: list[Country] = []
    for record in upstream:
        code = _text(record.get("countryCode"))
        code_number = _COUNTRY_CODE_NUMBER_CORRECTIONS.get(code) or _parse_int(
            record.get("countryCodeNumber")
        )
        countries.append(
            Country(
                code=code,
                description=_text(record.get("description")),
                code_number=code_number or 0,
            )
        )
    return countries


def map_salary_types(upstream: Iterable[UpstreamRecord]) -> list[SalaryTypeRecord]:
    """Map upstream salary types into product records."""

    return [
        SalaryTypeRecord(
            id=_parse_int(record.get("salaryTypeId")) or 0,
            salary_type=_text(record.get("description")),
        )
        for record in upstream
    ]


def map_job_statuses(upstream: Iterable[UpstreamRecord]) -> list[JobStatusRecord]:
    """Pass upstream job statuses through as product records.

    Ids line up with `JobStatus`; labels are kept verbatim.
    """

    return [
        JobStatusRecord(
            id=_parse_int(record.get("id")) or 0,
            status=_text(record.get("status")),
        )
        for record in upstream
    ]


def map_company_registration_types(
    upstream: Iterable[UpstreamRecord],
) -> list[CompanyRegistrationType]:
    """Map upstream company registration types into product records."""

    return [
        CompanyRegistrationType(
            id=_parse_int(record.get("registrationTypeCode")) or 0,
            registration_type=_text(record.get("description")),
        )
        for record in upstream
    ]
