"""
Read-only generation report and manual alias repointing
"""

import logging
from typing import Optional

from elasticsearch import Elasticsearch

from es_migrator import metrics
from .exceptions import IndexNotFound
from .models import GenerationStatus
from .naming import check_version, default_prefix, index_name, parse_versions
from .planner import check_alias_name, read_snapshot

logger = logging.getLogger(__name__)


def generation_status(
    es_client: Elasticsearch,
    alias_name: str,
    prefix: str = None
) -> GenerationStatus:
    """List all generations of prefix and the ones currently behind the alias"""
    prefix = prefix or default_prefix(alias_name)
    snapshot = read_snapshot(es_client)

    return GenerationStatus(
        alias=alias_name,
        prefix=prefix,
        versions=parse_versions(prefix, snapshot.index_names),
        live_versions=parse_versions(prefix, snapshot.indices_with_alias(alias_name)),
    )


def point_alias(
    es_client: Elasticsearch,
    alias_name: str,
    version: int,
    prefix: Optional[str] = None
) -> dict:
    """
    Point the alias at an existing generation, e.g. back at an older one.
    No data is copied; the generation's index must still exist.

    Returns:
        Raw update_aliases response
    """
    check_version(version)
    prefix = prefix or default_prefix(alias_name)
    snapshot = read_snapshot(es_client)

    check_alias_name(snapshot, alias_name, prefix)

    target = index_name(prefix, version)
    if target not in snapshot.index_names:
        raise IndexNotFound(target)

    actions = [
        {"remove": {"index": index, "alias": alias_name}}
        for index in snapshot.indices_with_alias(alias_name)
        if index != target
    ]
    actions.append({"add": {"index": target, "alias": alias_name}})

    response = es_client.indices.update_aliases(body={"actions": actions})
    logger.info("Alias '%s' now points to: %s", alias_name, target)
    metrics.set_current_version(alias_name, version)

    return response
