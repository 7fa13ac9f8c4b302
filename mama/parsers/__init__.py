"""
Parsers for command arguments.
"""
from .arg_parser import (
    parse_int,
    parse_positive_int,
    parse_non_negative_int,
    parse_int_in_range,
    split_markers,
    parse_fields,
    check_text,
)

__all__ = [
    'parse_int',
    'parse_positive_int',
    'parse_non_negative_int',
    'parse_int_in_range',
    'split_markers',
    'parse_fields',
    'check_text',
]
