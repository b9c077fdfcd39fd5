import xml.etree.ElementTree as ET

import pytest

from tests.conftest import SITE_LIST_XML
from whs_wiki.parser.sites import parse_site_list


def test_parse_site_list():
    sites = parse_site_list(SITE_LIST_XML)

    assert len(sites) == 2
    assert sites[0] == {
        "category": "Cultural",
        "id_number": "208",
        "site": "Cultural Landscape and Archaeological Remains of the Bamiyan Valley",
        "states": "Afghanistan",
    }


def test_missing_columns_filled():
    sites = parse_site_list(SITE_LIST_XML)
    assert sites[1]["states"] is None
    assert list(sites[1]) == ["category", "id_number", "site", "states"]


def test_malformed_xml():
    with pytest.raises(ET.ParseError):
        parse_site_list(b"<query><row>")
