"""Fixed locations, endpoints and region names used across the package."""

# =============================================================================
# Local data layout
# =============================================================================

DATA_FOLDER = "./data"
DATA_LOG_FILE = "data.log"

WHS_RAW_FILE = "whc-sites.xml"
WHS_FILE = "whc.json"
WHS_ARTICLES_FILE = "whsArticles.json"

# =============================================================================
# Remote endpoints
# =============================================================================

WHS_UNESCO_URL = "http://whc.unesco.org/en/list/xml/"
API_URL_WP = "https://en.wikipedia.org/w/api.php"
API_URL_WPM = "http://wikipedia-miner.cms.waikato.ac.nz/services/"

USER_AGENT = "whs-wiki/0.1 (World Heritage Site article scraper; contact@example.com)"

# =============================================================================
# Wikipedia list articles, one per region
# =============================================================================

LIST_ARTICLE_PREFIX = "List_of_World_Heritage_Sites_in_"

CONTINENTS = [
    "Africa",
    "the_Americas",
    "Northern_and_Central_Asia",
    "Western_Asia",
    "Eastern_Asia",
    "Southern_Asia",
    "Southeast_Asia",
    "Northern_Europe",
    "Western_Europe",
    "Eastern_Europe",
    "Southern_Europe",
    "Oceania",
]

# Roots of the category-based article list
WHS_CATEGORIES = [
    "World Heritage Sites by continent",
    "World Heritage Sites in the United Kingdom",
    "World Heritage Sites in the Republic of Ireland",
    "World Heritage Sites in Catalonia",
]
