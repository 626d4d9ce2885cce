"""Identifier validation for app names, package ids, URL schemes and domains.

These are user-facing contracts: the length and charset bounds are printed
in the error help text, so the patterns must stay in sync with it.
"""
import re

APP_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]{2,49}$")
PACKAGE_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9]*(\.[a-z][a-z0-9]*)+$")
APP_SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9-]{2,19}$")
DOMAIN_PATTERN = re.compile(
    r"^[a-zA-Z0-9][a-zA-Z0-9-]{0,61}[a-zA-Z0-9]?\.[a-zA-Z]{2,}(\.[a-zA-Z]{2,})*$"
)


def validate_app_name(name: str) -> bool:
    """Letter first, 3-50 chars of letters, digits, hyphen, underscore."""
    return APP_NAME_PATTERN.fullmatch(name) is not None


def validate_package_name(package_name: str) -> bool:
    """Reverse-domain notation with at least two lowercase segments."""
    return PACKAGE_NAME_PATTERN.fullmatch(package_name) is not None


def is_two_segment_package(package_name: str) -> bool:
    return len(package_name.split(".")) == 2


def validate_app_scheme(scheme: str) -> bool:
    """Lowercase letter first, 3-20 chars of lowercase letters, digits, hyphen."""
    return APP_SCHEME_PATTERN.fullmatch(scheme) is not None


def validate_domain(domain: str) -> bool:
    """A host label followed by one or more alphabetic labels (TLD >= 2 chars)."""
    return DOMAIN_PATTERN.fullmatch(domain) is not None


def suggest_package_name(package_name: str) -> str:
    """Suggest a three-segment replacement for a two-segment package id."""
    segments = package_name.split(".")
    if len(segments) != 2:
        return package_name
    return f"{segments[0]}.company.{segments[1]}"
