"""
Example: Show index generations behind an alias

Usage:
    python examples/migration_status.py products

Environment variables:
    - ES_URL: Elasticsearch URL (default: http://localhost:9200)
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from es_migrator.es_client import create_es_client, get_es_info, check_es_health
from es_migrator.migration import generation_status, index_name


def main():
    """Print cluster info and alias generations"""
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)

    alias_name = sys.argv[1]

    print("=== Alias Status ===")

    print("\nConnecting to Elasticsearch...")
    es = create_es_client()

    info = get_es_info(es)
    print(f"\nCluster Info:")
    print(f"  Name: {info['cluster_name']}")
    print(f"  Version: {info['version']['number']}")

    health = check_es_health(es)
    print(f"\nCluster Health:")
    print(f"  Status: {health['status']}")

    status = generation_status(es, alias_name)
    print(f"\nAlias: {status.alias} (prefix '{status.prefix}')")

    if not status.versions:
        print("  No generations yet")
        return

    for version in status.versions:
        marker = "*" if version in status.live_versions else " "
        print(f"  {marker} {index_name(status.prefix, version)}")

    if len(status.live_versions) > 1:
        print(f"\n[WARNING] Alias is bound to {len(status.live_versions)} generations")
    if status.retired_versions:
        print("\nRetired generations can be deleted manually.")


if __name__ == "__main__":
    main()
