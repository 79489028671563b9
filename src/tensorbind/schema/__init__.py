"""Declaration schema loading and structural validation."""

from .loader import (
    expect_bool,
    expect_list,
    expect_map,
    expect_string,
    load_records,
    require,
    scalar_text,
    split_records,
    validate_record,
)
from .records import RECORD_SCHEMA

__all__ = [
    "RECORD_SCHEMA",
    "expect_bool",
    "expect_list",
    "expect_map",
    "expect_string",
    "load_records",
    "require",
    "scalar_text",
    "split_records",
    "validate_record",
]
