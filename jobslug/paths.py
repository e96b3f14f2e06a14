"""URL path parsers for job and job-alert routes.

Responsibilities:
- Recover job identifiers from job detail and job application paths.
- Recover job-alert checksums from unsubscribe paths.

Inputs are URL paths, not full URLs. No parser raises for malformed input;
a missing match is reported as `None` (or `False`).
"""

from __future__ import annotations

import re


_JOB_ID_RE = re.compile(r"job/(?:.*-)?(.*)", re.IGNORECASE)
_JOB_APPLICATION_RE = re.compile(r"/apply/?\Z")
_JOB_ALERT_CHECKSUM_RE = re.compile(r"jobalert/remove/(?:.*-)?(.*)\Z", re.IGNORECASE)

_APPLY_SEGMENT = "apply"


def path_to_job_id(path: str | None) -> str | None:
    """Return the job identifier embedded in a job path.

    The identifier is the text after the last hyphen following `job/`. When the
    path continues with `/apply`, the segment before it is used instead.

    Args:
        path: URL path such as `/job/engineering/senior-engineer-abc123/apply`.

    Returns:
        The identifier, or `None` when the path is not a job path.
    """

    if not path:
        return None
    trimmed = path[:-1] if path.endswith("/") else path

    match = _JOB_ID_RE.search(trimmed)
    if match is None or not match.group(1):
        return None

    segments = match.group(1).split("/")
    if segments[-1] == _APPLY_SEGMENT:
        job_id = segments[-2] if len(segments) > 1 else None
    else:
        job_id = segments[-1]
    return job_id or None


def is_job_application_path(path: str | None) -> bool:
    """Return whether the path ends with `/apply`, with an optional trailing slash."""

    return bool(path) and _JOB_APPLICATION_RE.search(path) is not None


def path_to_job_alert_checksum(path: str | None) -> str | None:
    """Return the checksum after the last hyphen of a job-alert removal path."""

    if not path:
        return None
    match = _JOB_ALERT_CHECKSUM_RE.search(path)
    if match is None or not match.group(1):
        return None
    return match.group(1)
