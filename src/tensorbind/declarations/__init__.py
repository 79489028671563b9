"""Declaration filtering, seeding and exported-name assignment."""

from .filter import EXCLUDED_FUNCTIONS, FilterResult, Rejection, filter_records, normalize_record
from .naming import KEYWORD_ESCAPES, assign_exported_names, escape_name
from .seeds import SEED_RECORDS, with_seeds

__all__ = [
    "EXCLUDED_FUNCTIONS",
    "FilterResult",
    "KEYWORD_ESCAPES",
    "Rejection",
    "SEED_RECORDS",
    "assign_exported_names",
    "escape_name",
    "filter_records",
    "normalize_record",
    "with_seeds",
]
