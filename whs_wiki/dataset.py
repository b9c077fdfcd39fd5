"""Download-or-load operations on the World Heritage Site dataset."""

import logging
from typing import Dict, Iterable, List, Optional, Union

from .constants import CONTINENTS, WHS_CATEGORIES
from .fetcher.api_client import TranslationClient, UnescoClient, WikipediaClient
from .fetcher.store import DataStore
from .parser.list_articles import list_article_title, merge_articles, parse_list_rows
from .parser.markup import extract_wikitext, get_redirect, get_whs_id_number, is_redirect
from .parser.sites import parse_site_list

logger = logging.getLogger("whs_wiki")
data_logger = logging.getLogger("whs_wiki.data")


class WhsDataset:
    """UNESCO site list and Wikipedia articles, cached in a data folder.

    Every getter first looks for the file in the store and only goes to the
    network when the file is missing or a refresh is requested.
    """

    def __init__(
        self,
        store: Optional[DataStore] = None,
        wiki: Optional[WikipediaClient] = None,
        unesco: Optional[UnescoClient] = None,
        translator: Optional[TranslationClient] = None,
    ):
        self.store = store or DataStore()
        self.wiki = wiki or WikipediaClient()
        self.unesco = unesco or UnescoClient()
        self.translator = translator or TranslationClient()

    # -------------------------------------------------------------------------
    # UNESCO site list
    # -------------------------------------------------------------------------

    def download_sites(self, overwrite: bool = False) -> bool:
        """Download the UNESCO site list and convert it to records.

        The raw XML is downloaded when missing or when overwrite is set. The
        converted table is rebuilt when the raw file is new or the table is
        missing.

        Args:
            overwrite: If True, download the raw file again.

        Returns:
            True if the raw file was downloaded.
        """
        self.store.create_folders()
        raw_path = self.store.site_list_raw_path
        table_path = self.store.site_list_path

        raw_exists = raw_path.exists()
        new_file = False
        if not raw_exists or overwrite:
            self.store.write_bytes(raw_path, self.unesco.get_site_list())
            new_file = True
            data_logger.info(
                f"WHS raw file '{raw_path}' downloaded from '{self.unesco.url}'."
            )
            if raw_exists:
                data_logger.warning("WHS raw file overwritten.")

        table_exists = table_path.exists()
        if not table_exists or new_file:
            with open(raw_path, "rb") as f:
                sites = parse_site_list(f.read())
            data_logger.info(f"WHS raw file '{raw_path}' converted to records.")

            self.store.write_json(table_path, sites)
            data_logger.info(f"WHS records '{table_path}' saved to disk.")
            if table_exists:
                data_logger.warning("WHS records file overwritten.")

        return new_file

    def load_sites(self) -> List[Dict]:
        return self.store.read_json(self.store.site_list_path)

    # -------------------------------------------------------------------------
    # Wiki markup
    # -------------------------------------------------------------------------

    def get_markup(self, title: str, refresh: bool = False) -> str:
        """Get the wiki markup of an article, downloading it if needed.

        Args:
            title: Article title.
            refresh: If True, download it even if cached.

        Returns:
            Wiki markup text.
        """
        path = self.store.markup_path(title)
        if refresh or not path.exists():
            self.store.create_folders()
            exists = path.exists()
            response = self.wiki.get_revisions(title.replace(" ", "_"))
            self.store.write_json(path, response)
            logger.info(f"Downloaded markup of '{title}'")
            if exists:
                data_logger.warning(f"Wiki markup file '{path}' overwritten.")
        else:
            response = self.store.read_json(path)

        return extract_wikitext(response)

    def get_markups(self, titles: Iterable[str], refresh: bool = False) -> List[str]:
        return [self.get_markup(title, refresh=refresh) for title in titles]

    def resolve_title(self, title: str) -> str:
        """Follow the redirect of an article, if it is one."""
        markup = self.get_markup(title)
        if is_redirect(markup):
            return get_redirect(markup)
        return title

    def get_whs_id(self, title: str) -> Optional[int]:
        """Get the WHS id number of an article after resolving redirects."""
        return get_whs_id_number(self.get_markup(self.resolve_title(title)))

    # -------------------------------------------------------------------------
    # Translations
    # -------------------------------------------------------------------------

    def get_article_translation(
        self, title: str, lang: str = ""
    ) -> Union[Dict[str, str], Optional[str]]:
        """Get the translations of an English article.

        Args:
            title: English article title; redirects are followed first.
            lang: Language code. Empty string or "en" returns every
                translation.

        Returns:
            Mapping of language code to title, or the title in ``lang``
            (None if there is no such translation).
        """
        translations = self.translator.get_translations(self.resolve_title(title))
        if lang in ("", "en"):
            return translations
        return translations.get(lang)

    def translate_articles_list(
        self, titles: Iterable[str], lang: str = "en"
    ) -> List[Union[Dict[str, str], Optional[str]]]:
        return [self.get_article_translation(title, lang) for title in titles]

    # -------------------------------------------------------------------------
    # Site articles
    # -------------------------------------------------------------------------

    def get_whs_articles(self, region: str, refresh: bool = False) -> Dict[str, List[str]]:
        """Get the articles of the sites listed for one region.

        Args:
            region: One of CONTINENTS, e.g. "Western_Europe".
            refresh: If True, download the list article again.

        Returns:
            Mapping of site name to article titles.
        """
        markup = self.get_markup(list_article_title(region), refresh=refresh)
        data_logger.info(f"Downloaded list of WHS articles for '{region}'.")
        return parse_list_rows(markup)

    def download_whs_articles(
        self,
        overwrite: bool = False,
        regions: Iterable[str] = CONTINENTS,
    ) -> bool:
        """Build the site → articles mapping of all regions and save it.

        Args:
            overwrite: If True, rebuild the file even if it exists.
            regions: Regions to scrape (an iterable, so it can be wrapped in
                a progress bar).

        Returns:
            True if the file was (re)built.
        """
        self.store.create_folders()
        path = self.store.articles_path

        exists = path.exists()
        if exists and not overwrite:
            return False

        articles: Dict[str, List[str]] = {}
        for region in regions:
            merge_articles(articles, self.get_whs_articles(region, refresh=overwrite))

        self.store.write_json(path, articles)
        data_logger.info(f"WHS articles list '{path}' saved to disk.")
        if exists:
            data_logger.warning("WHS articles list overwritten.")
        return True

    def load_whs_articles(self) -> Dict[str, List[str]]:
        return self.store.read_json(self.store.articles_path)

    def get_category_articles(
        self, categories: Iterable[str] = WHS_CATEGORIES, depth: int = 2
    ) -> List[str]:
        """Get the union of articles categorised under the given categories."""
        titles: List[str] = []
        for category in categories:
            for title in self.wiki.get_category_members(category, depth=depth):
                if title not in titles:
                    titles.append(title)
        return titles

    def link_articles(self, articles: Dict[str, List[str]]) -> List[Dict]:
        """Pair each scraped article with the WHS id in its infobox.

        Args:
            articles: Mapping of site name to article titles.

        Returns:
            One record per (site, article) with keys "site", "article"
            and "id_number" (None when the infobox has no id).
        """
        records = []
        for site, titles in articles.items():
            for title in titles:
                id_number = self.get_whs_id(title)
                if id_number is None:
                    logger.info(f"No WHS id found in '{title}'")
                records.append({"site": site, "article": title, "id_number": id_number})
        return records
