"""
Example: Point an alias back at an older generation

Usage:
    python examples/point_alias.py products 3

Environment variables:
    - ES_URL: Elasticsearch URL (default: http://localhost:9200)
    - ES_API_KEY: Elastic Cloud API Key (optional, for cloud auth)
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from es_migrator.es_client import create_es_client
from es_migrator.migration import MigrationError, point_alias


def main():
    """Repoint alias without copying data"""
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)

    alias_name, version = sys.argv[1], int(sys.argv[2])

    print("=== Point Alias ===")
    es = create_es_client()

    print(f"\nAlias '{alias_name}' will serve generation {version}.")
    print("Documents written since that generation was replaced are not copied back.")
    confirm = input("Continue? [y/N]: ").strip().lower()
    if confirm != 'y':
        print("Aborted.")
        return

    try:
        point_alias(es, alias_name, version)
    except MigrationError as e:
        print(f"\n[ERROR] {e}")
        sys.exit(1)

    print("\nDone!")


if __name__ == "__main__":
    main()
