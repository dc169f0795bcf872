"""
Generation naming: IndexName(v) = prefix + v

Prefixes are used as anchored delimiters, so two aliases must not use
prefixes where one is a prefix of the other (e.g. "a__v" and "a__v1").
"""

import re
from typing import Iterable, List, Optional

PREFIX_SUFFIX = "__v"


def default_prefix(alias_name: str) -> str:
    """Default index prefix for an alias"""
    return alias_name + PREFIX_SUFFIX


def index_name(prefix: str, version: int) -> str:
    """Physical index name of one generation"""
    return f"{prefix}{version}"


def generation_pattern(prefix: str):
    return re.compile("^" + re.escape(prefix) + r"(\d+)$")


def parse_version(prefix: str, name: str) -> Optional[int]:
    """Generation number of an index name, or None if it is not a generation of prefix"""
    match = generation_pattern(prefix).match(name)
    if not match:
        return None
    version = int(match.group(1))
    # "prefix0" and zero-padded names never come from index_name()
    if version < 1 or index_name(prefix, version) != name:
        return None
    return version


def parse_versions(prefix: str, names: Iterable[str]) -> List[int]:
    """Generation numbers found in names, highest first; non-matches are dropped"""
    versions = set()
    for name in names:
        version = parse_version(prefix, name)
        if version is not None:
            versions.add(version)
    return sorted(versions, reverse=True)


def check_version(version, field: str = "version") -> int:
    """Validate a caller-supplied generation number"""
    if isinstance(version, bool) or not isinstance(version, int):
        raise ValueError(f"{field} must be an int, got {version!r}")
    if version < 1:
        raise ValueError(f"{field} must be positive, got {version}")
    return version
