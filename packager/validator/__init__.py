"""Validator helpers for config schema and built packages."""

from packager.validator.package_validator import PackageCheck, PackageIssue, verify_package
from packager.validator.schema_validator import SchemaIssue, validate_schema

__all__ = [
    "PackageCheck",
    "PackageIssue",
    "SchemaIssue",
    "validate_schema",
    "verify_package",
]
