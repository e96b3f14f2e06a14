"""Top-level package for jobslug.

This package builds URL slugs for job postings, parses job and job-alert URL
paths, and holds the product reference taxonomies. The main entry points are
`clean_word`, `format_job_url` and the `jobslug.paths` parsers.
"""

from loguru import logger

from .paths import is_job_application_path, path_to_job_alert_checksum, path_to_job_id
from .text.cleaners import remove_stop_words
from .text.slug import WordCleaner, clean_word
from .urls import format_job_url

logger.disable("jobslug")

__all__ = [
    "WordCleaner",
    "clean_word",
    "format_job_url",
    "is_job_application_path",
    "path_to_job_alert_checksum",
    "path_to_job_id",
    "remove_stop_words",
    "__version__",
]

__version__ = "0.1.0"
