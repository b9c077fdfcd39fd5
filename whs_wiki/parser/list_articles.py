"""Scraping of the "List of World Heritage Sites in ..." articles.

Each site is a row of a wikitable whose first cell is a row header:

    ! scope="row" | {{sort|Aksum|[[Aksum (archaeological site)|Aksum]]}}

Only these header cells are read. The patterns are tied to the markup
conventions of the list articles and need upkeep when those change.
"""

import re
from typing import Dict, List, Tuple

from ..constants import LIST_ARTICLE_PREFIX

ROW_MARKER = '! scope="row" |'

IN_DANGER_PATTERN = re.compile(r"<sup>\{\{†\|alt=In danger\}\}</sup>[ ]*")
SORT_PATTERN = re.compile(r"\{\{sort\|[^|]+\|")
LINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]")
SPACES_PATTERN = re.compile(r"[ ]{2,}")


def list_article_title(region: str) -> str:
    """Title of the list article for a region, e.g. "Africa"."""
    return f"{LIST_ARTICLE_PREFIX}{region}"


def clean_row(line: str) -> str:
    """Strip the row marker and decorative templates from a header cell."""
    line = line.replace(ROW_MARKER, "")
    line = IN_DANGER_PATTERN.sub("", line)
    line = SORT_PATTERN.sub("", line)
    line = line.replace("}}", "")
    line = line.strip(" ")
    return SPACES_PATTERN.sub(" ", line)


def parse_row(line: str) -> Tuple[str, List[str]]:
    """Get the site name and linked article titles of a header cell.

    Args:
        line: A markup line containing the row marker.

    Returns:
        (site name as rendered, link targets in order of appearance).
    """
    line = clean_row(line)

    def label(match):
        return match.group(1).split("|")[-1].strip()

    site = LINK_PATTERN.sub(label, line).strip()
    titles = [m.group(1).split("|")[0].strip() for m in LINK_PATTERN.finditer(line)]
    return site, titles


def parse_list_rows(markup: str) -> Dict[str, List[str]]:
    """Get the articles of every site listed in a list article.

    Args:
        markup: Wiki markup of a list article.

    Returns:
        Mapping of site name to article titles. A site listed twice keeps
        the union of its titles.
    """
    articles: Dict[str, List[str]] = {}
    for line in markup.splitlines():
        if ROW_MARKER not in line:
            continue
        site, titles = parse_row(line)
        merge_articles(articles, {site: titles})
    return articles


def merge_articles(target: Dict[str, List[str]], other: Dict[str, List[str]]) -> None:
    """Merge a site → titles mapping into another, in place."""
    for site, titles in other.items():
        known = target.setdefault(site, [])
        for title in titles:
            if title not in known:
                known.append(title)
