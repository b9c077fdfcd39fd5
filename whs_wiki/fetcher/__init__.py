"""Downloading and on-disk caching of UNESCO and Wikipedia data."""

from .api_client import TranslationClient, UnescoClient, WikipediaClient
from .cache import WikiCache
from .store import DataStore

__all__ = ["DataStore", "TranslationClient", "UnescoClient", "WikiCache", "WikipediaClient"]
