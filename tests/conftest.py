"""Shared fixtures: a throwaway data folder and offline clients."""

from unittest.mock import MagicMock

import pytest

from whs_wiki.dataset import WhsDataset
from whs_wiki.fetcher.api_client import TranslationClient, UnescoClient, WikipediaClient
from whs_wiki.fetcher.store import DataStore


def revisions_response(text, title="Page", page_id="1"):
    """Build a MediaWiki revisions response holding one page."""
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                page_id: {
                    "pageid": int(page_id),
                    "ns": 0,
                    "title": title,
                    "revisions": [
                        {
                            "contentformat": "text/x-wiki",
                            "contentmodel": "wikitext",
                            "*": text,
                        }
                    ],
                }
            }
        },
    }


SITE_LIST_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<query>
  <row>
    <category>Cultural</category>
    <id_number>208</id_number>
    <site>Cultural Landscape <i>and</i> Archaeological Remains of the Bamiyan Valley</site>
    <states>Afghanistan</states>
  </row>
  <row>
    <category>Cultural</category>
    <id_number>90</id_number>
    <site>Abu Mena</site>
  </row>
</query>
"""


@pytest.fixture
def store(tmp_path):
    store = DataStore(str(tmp_path / "data"))
    yield store
    store.close()


@pytest.fixture
def wiki():
    return MagicMock(spec=WikipediaClient)


@pytest.fixture
def unesco():
    client = MagicMock(spec=UnescoClient)
    client.url = "http://whc.unesco.org/en/list/xml/"
    client.get_site_list.return_value = SITE_LIST_XML
    return client


@pytest.fixture
def translator():
    return MagicMock(spec=TranslationClient)


@pytest.fixture
def dataset(store, wiki, unesco, translator):
    return WhsDataset(store=store, wiki=wiki, unesco=unesco, translator=translator)


def serve_markup(wiki, pages):
    """Answer get_revisions from a title → markup mapping.

    Titles are looked up with underscores, the way the dataset requests them.
    """
    def get_revisions(title):
        return revisions_response(pages[title.replace(" ", "_")], title=title)

    wiki.get_revisions.side_effect = get_revisions
