"""Job detail URL construction."""

from __future__ import annotations

from .taxonomy.categories import CATEGORY, get_category_by_label
from .text.slug import WordCleaner, clean_word


def format_job_url(
    uuid: str,
    job_title: str | None = None,
    company: str | None = None,
    category_label: str | None = None,
    cleaner: WordCleaner | None = None,
) -> str:
    """Build the job detail path for a posting.

    The final path segment is `<title>-<company>-<uuid>`, omitting empty slug
    parts, so `jobslug.paths.path_to_job_id` recovers `uuid` when it contains
    no hyphen.

    Args:
        uuid: Opaque job identifier.
        job_title: Posting title, slugged with the cleaner.
        company: Hiring company name, slugged with the cleaner.
        category_label: Category label; known labels add a category segment.
        cleaner: Optional cleaner with a custom stop-word set.

    Returns:
        `/job/<category-url>/<segment>` for known categories, else `/job/<segment>`.
    """

    clean = cleaner.clean if cleaner is not None else clean_word
    slug_parts = (clean(job_title), clean(company))
    url_segment = "".join(f"{part}-" for part in slug_parts if part) + uuid

    category_key = get_category_by_label(category_label)
    if category_key is None:
        return f"/job/{url_segment}"
    return f"/job/{CATEGORY[category_key].url}/{url_segment}"
