"""
Canonical decoding of JSON columns.

Depending on the database driver and on how a row was written, a JSON
column can come back as an already-decoded structure, as JSON text (for
example a value that was serialized twice), or as raw bytes. Every read
path funnels through ``decode_json_value`` so callers always receive plain
Python data.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def decode_json_value(value: Any) -> Any:
    """
    Return ``value`` as plain structured data.

    Branches:
        - None, dict, list, numbers, bool: returned unchanged
        - bytes / bytearray / memoryview: decoded as UTF-8, then parsed
        - str: parsed as JSON

    Decoding never raises. If parsing fails the original value is returned
    (for binary input, the decoded text when UTF-8 decoding succeeded).
    """
    if value is None or isinstance(value, (dict, list, int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            value = bytes(value).decode('utf-8')
        except UnicodeDecodeError:
            logger.warning("JSON column holds non UTF-8 bytes; returning raw value")
            return value

    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.warning("JSON column holds unparseable text; returning it unchanged")
            return value
        # Double-encoded payloads decode to another JSON string
        if isinstance(decoded, str) and decoded != value:
            return decode_json_value(decoded)
        return decoded

    return value
