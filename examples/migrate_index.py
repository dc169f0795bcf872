"""
Example: Migrate an alias to a new index generation

Usage:
    # Create the next generation from a mapping file and reindex into it
    python examples/migrate_index.py products mappings/products.json

    # Explicit version, no data copy
    MIGRATION_VERSION=5 MIGRATION_REINDEX=false python examples/migrate_index.py products mappings/products.json

Environment variables:
    - ES_URL: Elasticsearch URL (default: http://localhost:9200)
    - ES_API_KEY: Elastic Cloud API Key (optional, for cloud auth)
    - MIGRATION_VERSION: Explicit target version (optional)
    - MIGRATION_REPLACED_VERSION: Generation to replace (optional, default: current one)
    - MIGRATION_REINDEX: Copy documents from the replaced generation (default: true)
"""

import json
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from es_migrator import get_env_bool, get_env_int
from es_migrator.es_client import create_es_client
from es_migrator.migration import MigrationError, MigrationPlanner, default_prefix


def main():
    """Plan, confirm and run one migration"""
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)

    alias_name, mapping_path = sys.argv[1], sys.argv[2]
    with open(mapping_path, encoding="utf-8") as f:
        index_body = json.load(f)

    version = get_env_int("MIGRATION_VERSION") if os.getenv("MIGRATION_VERSION") else None
    replaced_version = (
        get_env_int("MIGRATION_REPLACED_VERSION") if os.getenv("MIGRATION_REPLACED_VERSION") else None
    )
    reindex = get_env_bool("MIGRATION_REINDEX") if os.getenv("MIGRATION_REINDEX") else True

    print("=== Alias Migration ===")

    print("\nConnecting to Elasticsearch...")
    es = create_es_client()
    print(f"Connected to cluster: {es.info()['cluster_name']}")

    planner = MigrationPlanner(es, alias_name, default_prefix(alias_name), index_body, version)

    try:
        plan = planner.plan(reindex=reindex, replaced_version=replaced_version)
    except MigrationError as e:
        print(f"\n[ERROR] {e}")
        sys.exit(1)

    print(f"\nAlias:    {plan.alias}")
    print(f"New:      {plan.index} (version {plan.version})")
    print(f"Replaced: {plan.replaced_index or '-'}")
    print(f"Reindex:  {plan.reindex}")

    confirm = input("\nContinue? [y/N]: ").strip().lower()
    if confirm != 'y':
        print("Aborted.")
        return

    print("\nMigrating...")
    try:
        result = planner.execute(reindex=reindex, replaced_version=replaced_version)
    except MigrationError as e:
        # The namespace changed between plan and execute
        print(f"\n[ERROR] {e}")
        sys.exit(1)

    print(f"\nMigration complete!")
    print(f"Alias '{result.alias}' now points to: {result.index}")
    print(f"Steps: {', '.join(result.responses)}")
    if result.replaced_index:
        print(f"Old index (can be deleted manually): {result.replaced_index}")


if __name__ == "__main__":
    main()
