"""
Tests for the generation report and manual alias repointing.
"""

import pytest

from es_migrator.migration import (
    IndexNotFound,
    InvalidAliasName,
    generation_status,
    migrate,
    point_alias,
)


ALIAS = "users"


class TestGenerationStatus:
    def test_no_generations(self, engine):
        status = generation_status(engine, ALIAS)

        assert status.prefix == "users__v"
        assert status.versions == []
        assert status.current_version is None

    def test_live_and_retired(self, engine, index_body):
        migrate(engine, ALIAS, index_body)
        migrate(engine, ALIAS, index_body)
        engine.add_index("users__v1_backup")

        status = generation_status(engine, ALIAS)

        assert status.versions == [2, 1]
        assert status.live_versions == [2]
        assert status.current_version == 2
        assert status.retired_versions == [1]

    def test_custom_prefix(self, engine):
        engine.add_index("u-7", aliases=[ALIAS])

        status = generation_status(engine, ALIAS, prefix="u-")

        assert status.current_version == 7


class TestPointAlias:
    def test_points_back_to_older_generation(self, engine, index_body):
        migrate(engine, ALIAS, index_body)
        migrate(engine, ALIAS, index_body)
        engine.calls.clear()

        point_alias(engine, ALIAS, 1)

        assert engine.resolve(ALIAS) == ["users__v1"]
        assert engine.mutating_calls() == ["update_aliases"]

    def test_already_current(self, engine, index_body):
        migrate(engine, ALIAS, index_body)

        point_alias(engine, ALIAS, 1)

        assert engine.resolve(ALIAS) == ["users__v1"]

    def test_missing_generation(self, engine, index_body):
        migrate(engine, ALIAS, index_body)
        before = engine.state()

        with pytest.raises(IndexNotFound):
            point_alias(engine, ALIAS, 5)

        assert engine.state() == before

    def test_alias_collision(self, engine):
        engine.add_index(ALIAS)
        engine.add_index("users__v1")

        with pytest.raises(InvalidAliasName):
            point_alias(engine, ALIAS, 1)

    def test_next_migration_after_repoint(self, engine, index_body):
        migrate(engine, ALIAS, index_body)
        migrate(engine, ALIAS, index_body)
        point_alias(engine, ALIAS, 1)

        result = migrate(engine, ALIAS, index_body, version=3)

        assert result.replaced_index == "users__v1"
        assert engine.resolve(ALIAS) == ["users__v3"]
