"""Parsing of the UNESCO site list and of raw wiki markup."""

from .list_articles import list_article_title, parse_list_rows
from .markup import (
    PageNotFoundError,
    extract_wikitext,
    get_redirect,
    get_whs_id_number,
    get_whs_id_numbers,
    is_redirect,
)
from .matching import edit_distance, get_closest
from .sites import parse_site_list

__all__ = [
    "PageNotFoundError",
    "edit_distance",
    "extract_wikitext",
    "get_closest",
    "get_redirect",
    "get_whs_id_number",
    "get_whs_id_numbers",
    "is_redirect",
    "list_article_title",
    "parse_list_rows",
    "parse_site_list",
]
