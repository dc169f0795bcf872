"""
Elasticsearch client initialization and utility functions
"""

import os
from elasticsearch import Elasticsearch

from es_migrator import get_env_int


def create_es_client(
    hosts: list = None,
    es_url: str = None,
    api_key: str = None,
    **kwargs
) -> Elasticsearch:
    """
    Create and configure Elasticsearch client

    Args:
        hosts: List of ES host strings (e.g., ["http://localhost:9200"])
        es_url: Single ES URL (alternative to hosts)
        api_key: Elastic Cloud API key (falls back to ES_API_KEY)
        **kwargs: Additional Elasticsearch client options

    Returns:
        Configured Elasticsearch client
    """
    # Priority: explicit params > env vars > defaults
    if hosts is None and es_url is None:
        es_url = os.getenv("ES_URL", "http://localhost:9200")

    if es_url:
        hosts = [es_url]

    api_key = api_key or os.getenv("ES_API_KEY")
    if api_key:
        kwargs.setdefault("api_key", api_key)

    if os.getenv("ES_REQUEST_TIMEOUT_S"):
        kwargs.setdefault("request_timeout", get_env_int("ES_REQUEST_TIMEOUT_S"))

    es = Elasticsearch(hosts, **kwargs)

    # Verify connection
    if not es.ping():
        raise ConnectionError(f"Cannot connect to Elasticsearch at {hosts}")

    return es


def get_es_info(es_client: Elasticsearch) -> dict:
    """Get Elasticsearch cluster info"""
    return es_client.info()


def check_es_health(es_client: Elasticsearch) -> dict:
    """Check Elasticsearch cluster health"""
    return es_client.cluster.health()
