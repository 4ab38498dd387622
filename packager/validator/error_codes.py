from __future__ import annotations


INVALID_JSON = "invalid_json"
UNSUPPORTED_ENTRY = "unsupported_entry"

CONFIG_SCHEMA_VIOLATION = "config_schema_violation"

ARCHIVE_MISSING = "archive_missing"
ARCHIVE_CORRUPT = "archive_corrupt"
DIGEST_MISSING = "digest_missing"
DIGEST_MALFORMED = "digest_malformed"
DIGEST_MISMATCH = "digest_mismatch"
