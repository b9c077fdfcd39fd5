"""Scraping of raw wiki markup: redirects and World Heritage Site ids.

The id patterns follow the infobox templates that WHS articles have used
over time. They are tried in a fixed order and the first template shape
present in the markup decides which number is read:

1. ``{{Infobox World Heritage Site | ID = 208 ...}}``
2. ``designation1 = WHS`` with ``designation1_number = [<url> 208]``
3. the same with ``designation2``
4. a bare ``whs_number = 208``

Numbers may carry a lowercase suffix (``208bis``), which is ignored.
"""

import re
from typing import Dict, Iterable, List, Optional


class PageNotFoundError(LookupError):
    """The MediaWiki API reported the requested page as missing."""


REDIRECT_PATTERN = re.compile(r"#REDIRECT", re.IGNORECASE)
LINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]")

# =============================================================================
# Infobox template shapes, in priority order
# =============================================================================

_WS = r"[ \t]*"

INFOBOX_MARKER = re.compile(r"Infobox World Heritage Site")
INFOBOX_ID = re.compile(rf"{_WS}\|{_WS}ID{_WS}={_WS}([0-9]+)[a-z]*")


def _designation_marker(n: int):
    return re.compile(rf"designation{n}{_WS}={_WS}(?:WHS|World Heritage Site)")


def _designation_number(n: int):
    # e.g. "designation1_number = [http://whc.unesco.org/en/list/208 208]"
    return re.compile(rf"designation{n}_number{_WS}={_WS}[^ \n]*[ ]*([0-9]+)[a-z]*\]")


WHS_NUMBER_MARKER = re.compile(rf"whs_number{_WS}={_WS}[0-9]+")
WHS_NUMBER = re.compile(rf"whs_number{_WS}={_WS}([0-9]+)")

ID_PATTERNS = [
    (INFOBOX_MARKER, INFOBOX_ID),
    (_designation_marker(1), _designation_number(1)),
    (_designation_marker(2), _designation_number(2)),
    (WHS_NUMBER_MARKER, WHS_NUMBER),
]


def extract_wikitext(response: Dict) -> str:
    """Get the markup of the first page in a revisions API response.

    Args:
        response: JSON of an ``action=query&prop=revisions`` request.

    Returns:
        Wiki markup of the latest revision.

    Raises:
        PageNotFoundError: If the page does not exist.
    """
    pages = response["query"]["pages"]
    page_id, page = next(iter(pages.items()))
    if page_id == "-1" or "missing" in page or "invalid" in page:
        raise PageNotFoundError(f"Wikipedia page not found: {page.get('title', '?')}")

    revision = page["revisions"][0]
    if "slots" in revision:
        revision = revision["slots"]["main"]
    if "*" in revision:
        return revision["*"]
    return revision["content"]


def is_redirect(markup: str) -> bool:
    """Check whether the markup redirects to another page."""
    return REDIRECT_PATTERN.search(markup) is not None


def get_redirect(markup: str) -> str:
    """Get the title of the page the markup redirects to.

    Args:
        markup: Markup of a redirect page, e.g. "#REDIRECT [[Petra#History]]".

    Returns:
        Target title without any section anchor ("Petra").

    Raises:
        ValueError: If there is no redirect link in the markup.
    """
    for line in markup.splitlines():
        if not REDIRECT_PATTERN.search(line):
            continue
        match = LINK_PATTERN.search(line)
        if match:
            target = match.group(1)
            # "[[#Section]]" points into the same page and is kept whole
            if target.find("#") > 0:
                target = target.split("#")[0]
            return target.strip()

    raise ValueError("Wiki markup does not contain a redirect link.")


def get_whs_id_number(markup: Optional[str]) -> Optional[int]:
    """Get the WHS id number from the infobox of an article.

    Args:
        markup: Wiki markup of a WHS article.

    Returns:
        The id number, or None if no known template carries one.

    Raises:
        ValueError: If the markup is empty or is a redirect.
    """
    if not markup:
        raise ValueError("Wiki markup of WHS article is empty.")
    if is_redirect(markup):
        raise ValueError("Wiki markup of WHS article is a redirect.")

    for marker, number in ID_PATTERNS:
        if marker.search(markup):
            match = number.search(markup)
            return int(match.group(1)) if match else None

    return None


def get_whs_id_numbers(markups: Iterable[str]) -> List[Optional[int]]:
    return [get_whs_id_number(markup) for markup in markups]
