import pytest

from tests.conftest import revisions_response
from whs_wiki.parser.markup import (
    PageNotFoundError,
    extract_wikitext,
    get_redirect,
    get_whs_id_number,
    get_whs_id_numbers,
    is_redirect,
)

INFOBOX = """{{Infobox World Heritage Site
| WHS         = Abu Mena
| Image       = Abu Mena.jpg
| State Party = [[Egypt]]
| Type        = Cultural
| ID          = 90
| Year        = 1979
}}
'''Abu Mena''' was a town, monastery complex and Christian pilgrimage centre.
"""

INFOBOX_SUFFIX = """{{Infobox World Heritage Site
| WHS = Cultural Landscape and Archaeological Remains of the Bamiyan Valley
| ID  = 208bis
}}
"""

DESIGNATION1 = """{{Infobox ancient site
| name                = Petra
| designation1        = WHS
| designation1_offname = Petra
| designation1_number = [http://whc.unesco.org/en/list/326 326]
}}
"""

DESIGNATION2 = """{{Infobox religious building
| name                = Angkor Wat
| designation1        = National monument
| designation2        = World Heritage Site
| designation2_number = [http://whc.unesco.org/en/list/668 668]
}}
"""

WHS_NUMBER = """{{Infobox protected area
| name       = Uluru-Kata Tjuta National Park
| whs_number = 447
}}
"""


class TestRedirect:
    def test_detects_marker(self):
        assert is_redirect("#REDIRECT [[Petra]]")
        assert is_redirect("#redirect [[Petra]]\n{{R from alternative name}}")

    def test_plain_article(self):
        assert not is_redirect(INFOBOX)
        assert not is_redirect("")

    def test_target(self):
        assert get_redirect("#REDIRECT [[Machu Picchu]]") == "Machu Picchu"

    def test_target_section_stripped(self):
        markup = "#REDIRECT [[List of World Heritage Sites in Africa#Egypt]]\n"
        assert get_redirect(markup) == "List of World Heritage Sites in Africa"

    def test_same_page_section_kept(self):
        assert get_redirect("#REDIRECT [[#History]]") == "#History"

    def test_target_on_later_line(self):
        markup = "{{short description|none}}\n#REDIRECT [[Petra]] {{R from move}}"
        assert get_redirect(markup) == "Petra"

    def test_no_link(self):
        with pytest.raises(ValueError):
            get_redirect("#REDIRECT somewhere")


class TestWhsIdNumber:
    def test_infobox_id(self):
        assert get_whs_id_number(INFOBOX) == 90

    def test_suffix_ignored(self):
        assert get_whs_id_number(INFOBOX_SUFFIX) == 208
        assert get_whs_id_number(INFOBOX_SUFFIX.replace("208bis", "208")) == 208

    def test_designation1(self):
        assert get_whs_id_number(DESIGNATION1) == 326

    def test_designation1_suffix(self):
        markup = DESIGNATION1.replace("326 326]", "326 326rev]")
        assert get_whs_id_number(markup) == 326

    def test_designation2(self):
        assert get_whs_id_number(DESIGNATION2) == 668

    def test_whs_number(self):
        assert get_whs_id_number(WHS_NUMBER) == 447

    def test_priority_order(self):
        # Infobox template wins over a later whs_number field
        assert get_whs_id_number(INFOBOX + "\n| whs_number = 1\n") == 90

    def test_infobox_without_id(self):
        markup = "{{Infobox World Heritage Site\n| WHS = Somewhere\n}}"
        assert get_whs_id_number(markup) is None

    def test_not_found(self):
        assert get_whs_id_number("'''Petra''' is a city in [[Jordan]].") is None

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            get_whs_id_number("")
        with pytest.raises(ValueError, match="empty"):
            get_whs_id_number(None)

    def test_redirect(self):
        with pytest.raises(ValueError, match="redirect"):
            get_whs_id_number("#REDIRECT [[Abu Mena]]")

    def test_many(self):
        assert get_whs_id_numbers([INFOBOX, WHS_NUMBER, "no template"]) == [90, 447, None]


class TestExtractWikitext:
    def test_legacy_format(self):
        assert extract_wikitext(revisions_response(INFOBOX)) == INFOBOX

    def test_slots_format(self):
        response = {
            "query": {
                "pages": {
                    "5": {
                        "title": "Petra",
                        "revisions": [{"slots": {"main": {"*": "text"}}}],
                    }
                }
            }
        }
        assert extract_wikitext(response) == "text"

    def test_missing_page(self):
        response = {"query": {"pages": {"-1": {"ns": 0, "title": "Nowhere", "missing": ""}}}}
        with pytest.raises(PageNotFoundError):
            extract_wikitext(response)
