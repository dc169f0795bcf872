"""
Zero-downtime index migrations behind a stable alias

    read snapshot -> decide -> validate -> create -> reindex -> swap alias

Decisions are made against a single snapshot of the namespace; nothing is
mutated until every check has passed. Concurrent migrations of the same alias
are not coordinated here; index creation uniqueness on the engine side is the
only backstop.
"""

import logging
from typing import Any, Dict, Optional

from elasticsearch import Elasticsearch

from es_migrator import metrics
from .exceptions import IndexAlreadyExists, IndexNotFound, InvalidAliasName, MigrationError
from .models import EngineNamingSnapshot, MigrationPlan, MigrationResult
from .naming import check_version, default_prefix, index_name, parse_version, parse_versions

logger = logging.getLogger(__name__)


def read_snapshot(es_client: Elasticsearch) -> EngineNamingSnapshot:
    """Fetch every index with its aliases"""
    snapshot = EngineNamingSnapshot.from_alias_response(es_client.indices.get_alias())
    logger.debug(
        "Snapshot: %d indices, %d aliases",
        len(snapshot.index_names), len(snapshot.alias_names)
    )
    return snapshot


def check_alias_name(snapshot: EngineNamingSnapshot, alias: str, prefix: str):
    """
    The alias may only be bound to generations of its own prefix and must
    not be the name of an index.
    """
    if alias in snapshot.index_names:
        raise InvalidAliasName(alias)
    for index in snapshot.indices_with_alias(alias):
        if parse_version(prefix, index) is None:
            raise InvalidAliasName(alias)


def plan_migration(
    snapshot: EngineNamingSnapshot,
    alias: str,
    prefix: str,
    version: Optional[int] = None,
    replaced_version: Optional[int] = None,
    reindex: bool = True
) -> MigrationPlan:
    """
    Compute the migration decision from a snapshot. Pure: no engine calls.

    Raises:
        IndexAlreadyExists: target name is taken or equals the replaced index
        InvalidAliasName: alias collides with the namespace
        IndexNotFound: replaced_version is not a live generation of the alias
    """
    if version is not None and index_name(prefix, version) in snapshot.index_names:
        raise IndexAlreadyExists(index_name(prefix, version))

    check_alias_name(snapshot, alias, prefix)

    live_versions = parse_versions(prefix, snapshot.indices_with_alias(alias))

    # Auto-increment the version if it's not set explicitly
    if version is None:
        version = live_versions[0] + 1 if live_versions else 1
    target = index_name(prefix, version)

    if replaced_version is not None:
        replaced = index_name(prefix, replaced_version)
        if replaced_version not in live_versions:
            raise IndexNotFound(replaced)
    else:
        replaced = index_name(prefix, live_versions[0]) if live_versions else None

    if replaced == target:
        raise IndexAlreadyExists(target)

    # Orphans from an interrupted run, or an alias of the same name, also block creation
    if target in snapshot.taken_names:
        raise IndexAlreadyExists(target)

    return MigrationPlan(
        alias=alias,
        prefix=prefix,
        version=version,
        index=target,
        replaced_index=replaced,
        reindex=bool(reindex and replaced),
        live_versions=live_versions,
    )


class MigrationPlanner:
    """
    Creates the next index generation for an alias and swaps the alias to it.

    Usage:
        planner = MigrationPlanner(es, "products", "products__v", {"mappings": {...}})
        result = planner.execute()
    """

    def __init__(
        self,
        es_client: Elasticsearch,
        alias_name: str,
        prefix: str,
        index: Dict[str, Any],
        version: Optional[int] = None
    ):
        if not alias_name:
            raise ValueError("alias_name must be a non-empty string")
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        if version is not None:
            check_version(version)

        self.es = es_client
        self.alias_name = alias_name
        self.prefix = prefix
        self.index = index
        self.version = version
        # Responses of the last execute(), filled step by step
        self.last_responses: Dict[str, Any] = {}

    def plan(self, reindex: bool = True, replaced_version: Optional[int] = None) -> MigrationPlan:
        """Dry run: read the namespace and return the decision without mutating"""
        if replaced_version is not None:
            check_version(replaced_version, "replaced_version")
        return plan_migration(
            read_snapshot(self.es),
            self.alias_name,
            self.prefix,
            version=self.version,
            replaced_version=replaced_version,
            reindex=reindex,
        )

    def execute(self, reindex: bool = True, replaced_version: Optional[int] = None) -> MigrationResult:
        """
        Run the migration.

        Args:
            reindex: copy documents from the replaced index into the new one
            replaced_version: generation to move the alias away from
                (defaults to the highest live generation)

        Returns:
            MigrationResult with raw responses keyed by step name
        """
        self.last_responses = {}

        try:
            plan = self.plan(reindex=reindex, replaced_version=replaced_version)
        except MigrationError as e:
            logger.warning("Migration of alias '%s' rejected: %s", self.alias_name, e)
            metrics.inc_migration("rejected")
            raise

        logger.info(
            "Migrating alias '%s': %s -> %s (reindex=%s)",
            plan.alias, plan.replaced_index, plan.index, plan.reindex
        )

        try:
            self._apply(plan)
        except Exception:
            logger.error(
                "Migration of alias '%s' failed after steps %s",
                plan.alias, list(self.last_responses)
            )
            metrics.inc_migration("error")
            raise

        metrics.inc_migration("success")
        metrics.set_current_version(plan.alias, plan.version)

        return MigrationResult(
            replaced_index=plan.replaced_index,
            alias=plan.alias,
            index=plan.index,
            version=plan.version,
            responses=dict(self.last_responses),
        )

    def _apply(self, plan: MigrationPlan):
        """Issue create, optional reindex and the alias swap, in that order"""
        responses = self.last_responses

        with metrics.track_latency(metrics.step_latency_observer("create_index")):
            responses["create_index"] = self.es.indices.create(index=plan.index, body=self.index)
        logger.info("Created index %s", plan.index)

        if plan.reindex:
            # External version type keeps source document versions
            with metrics.track_latency(metrics.step_latency_observer("reindex")):
                responses["reindex"] = self.es.reindex(body={
                    "source": {"index": plan.replaced_index},
                    "dest": {"index": plan.index, "version_type": "external"},
                })
            logger.info("Reindexed %s into %s", plan.replaced_index, plan.index)

        # Remove and add go out in one request so the swap is atomic
        with metrics.track_latency(metrics.step_latency_observer("update_aliases")):
            responses["update_aliases"] = self.es.indices.update_aliases(
                body={"actions": plan.alias_actions()}
            )
        logger.info("Alias '%s' now points to: %s", plan.alias, plan.index)

    @classmethod
    def migrate(
        cls,
        es_client: Elasticsearch,
        alias_name: str,
        index: Dict[str, Any],
        version: Optional[int] = None,
        reindex: bool = True
    ) -> MigrationResult:
        """One-call migration with the default "<alias>__v" prefix"""
        planner = cls(es_client, alias_name, default_prefix(alias_name), index, version)
        return planner.execute(reindex=reindex)


def migrate(
    es_client: Elasticsearch,
    alias_name: str,
    index: Dict[str, Any],
    version: Optional[int] = None,
    reindex: bool = True
) -> MigrationResult:
    """Module-level shortcut for MigrationPlanner.migrate"""
    return MigrationPlanner.migrate(es_client, alias_name, index, version=version, reindex=reindex)
