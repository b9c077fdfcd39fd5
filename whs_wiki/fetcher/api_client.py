"""HTTP clients for the UNESCO site list, the MediaWiki API and the
cross-lingual linking service."""

import logging
from typing import Dict, List, Optional, Set

import requests
from ratelimit import limits, sleep_and_retry

from ..constants import API_URL_WP, API_URL_WPM, USER_AGENT, WHS_UNESCO_URL
from .cache import WikiCache

logger = logging.getLogger("whs_wiki")


class WikipediaClient:
    """Client for fetching raw wiki markup via the MediaWiki API."""

    API_URL = API_URL_WP
    USER_AGENT = USER_AGENT

    def __init__(self, api_url: Optional[str] = None):
        """Initialize the Wikipedia client.

        Args:
            api_url: Override for the MediaWiki endpoint (default: English
                Wikipedia).
        """
        self.api_url = api_url or self.API_URL
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})

    @sleep_and_retry
    @limits(calls=1, period=1)
    def _request(self, params: Dict) -> Dict:
        """Make a rate-limited API request.

        Args:
            params: API parameters.

        Returns:
            JSON response as dict.
        """
        params["format"] = "json"
        response = self.session.get(self.api_url, params=params)
        response.raise_for_status()
        return response.json()

    def get_revisions(self, title: str) -> Dict:
        """Get the raw revisions response holding the markup of an article.

        The response is returned untouched so it can be stored as is.

        Args:
            title: Article title (spaces or underscores).

        Returns:
            JSON response as dict.
        """
        params = {
            "action": "query",
            "titles": title,
            "prop": "revisions",
            "rvprop": "content",
        }
        logger.debug(f"Requesting markup of '{title}'")
        return self._request(params)

    def get_category_members(self, category: str, depth: int = 0) -> List[str]:
        """Get article titles in a category, descending into subcategories.

        Args:
            category: Category name, with or without the "Category:" prefix.
            depth: How many levels of subcategories to follow.

        Returns:
            Article titles in the order they were first seen.
        """
        titles: List[str] = []
        seen_titles: Set[str] = set()
        visited: Set[str] = set()

        level = [_category_title(category)]
        for _ in range(depth + 1):
            subcategories = []
            for cat_title in level:
                if cat_title in visited:
                    continue
                visited.add(cat_title)

                for member in self._iter_category(cat_title):
                    if member["ns"] == 14:
                        subcategories.append(member["title"])
                    elif member["ns"] == 0 and member["title"] not in seen_titles:
                        seen_titles.add(member["title"])
                        titles.append(member["title"])

            level = subcategories

        return titles

    def _iter_category(self, cat_title: str):
        params = {
            "action": "query",
            "list": "categorymembers",
            "cmtitle": cat_title,
            "cmtype": "page|subcat",
            "cmlimit": "500",
        }
        while True:
            data = self._request(dict(params))
            for member in data.get("query", {}).get("categorymembers", []):
                yield member
            if "continue" not in data:
                break
            params.update(data["continue"])


class UnescoClient:
    """Client for the official UNESCO list of World Heritage Sites."""

    URL = WHS_UNESCO_URL

    def __init__(self, url: Optional[str] = None):
        self.url = url or self.URL
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def get_site_list(self) -> bytes:
        """Download the raw XML site list.

        Returns:
            Response body, undecoded.
        """
        response = self.session.get(self.url)
        response.raise_for_status()
        return response.content


class TranslationClient:
    """Client for the Wikipedia Miner cross-lingual linking service."""

    API_URL = API_URL_WPM

    def __init__(self, cache: Optional[WikiCache] = None, api_url: Optional[str] = None):
        """Initialize the translation client.

        Args:
            cache: Optional cache instance for storing responses.
            api_url: Override for the service base URL.
        """
        self.cache = cache
        self.api_url = api_url or self.API_URL
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    @sleep_and_retry
    @limits(calls=1, period=1)
    def _request(self, params: Dict) -> Dict:
        response = self.session.get(self.api_url + "exploreArticle", params=params)
        response.raise_for_status()
        return response.json()

    def get_translations(self, title: str, refresh: bool = False) -> Dict[str, str]:
        """Get the titles of an English article in other languages.

        Args:
            title: English article title.
            refresh: If True, bypass the cache.

        Returns:
            Mapping of language code to article title.
        """
        def fetch():
            params = {
                "title": title,
                "translations": "true",
                "responseFormat": "json",
            }
            data = self._request(params)
            return {t["lang"]: t["text"] for t in data.get("translations", [])}

        if self.cache is None:
            return fetch()
        return self.cache.get_or_fetch(f"translations:{title}", fetch, refresh=refresh)


def _category_title(category: str) -> str:
    if category.startswith("Category:"):
        return category
    return f"Category:{category}"
