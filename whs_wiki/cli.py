"""Command-line interface for whs-wiki."""

import json
import logging
import sys
from functools import update_wrapper
from typing import Optional

import click
from tqdm import tqdm

from .constants import CONTINENTS, DATA_FOLDER, WHS_CATEGORIES
from .dataset import WhsDataset
from .fetcher.api_client import TranslationClient, UnescoClient, WikipediaClient
from .fetcher.cache import WikiCache
from .fetcher.store import DataStore
from .parser.markup import get_redirect, is_redirect
from .parser.matching import get_closest

# Set up logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("whs_wiki")


def _make_dataset(data_dir: str, cache_dir: Optional[str] = None) -> WhsDataset:
    cache = WikiCache(cache_dir) if cache_dir else None
    return WhsDataset(
        store=DataStore(data_dir),
        wiki=WikipediaClient(),
        unesco=UnescoClient(),
        translator=TranslationClient(cache=cache),
    )


def with_dataset(translation_cache: bool = False):
    """Pass a WhsDataset built from the group options to the command.

    The dataset is only built when a command that needs it runs. Errors
    raised by the command are reported on stderr with exit status 1.

    Args:
        translation_cache: If True, back the translation client with the
            disk cache from --cache-dir.
    """
    def decorator(f):
        @click.pass_context
        def new_func(ctx, *args, **kwargs):
            cache_dir = ctx.obj["cache_dir"] if translation_cache else None
            dataset = _make_dataset(ctx.obj["data_dir"], cache_dir)
            try:
                return ctx.invoke(f, dataset, *args, **kwargs)
            except Exception as e:
                click.echo(f"Error: {e}", err=True)
                sys.exit(1)
            finally:
                dataset.store.close()

        return update_wrapper(new_func, f)

    return decorator


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--data-dir",
    default=DATA_FOLDER,
    envvar="WHS_DATA_DIR",
    show_default=True,
    help="Folder holding downloaded and converted data",
)
@click.option(
    "--cache-dir",
    default="./cache",
    envvar="WHS_CACHE_DIR",
    show_default=True,
    help="Directory for caching translation responses",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, data_dir: str, cache_dir: str, verbose: bool):
    """whs-wiki - World Heritage Sites and their Wikipedia articles."""
    if verbose:
        logger.setLevel(logging.INFO)
    ctx.obj = {"data_dir": data_dir, "cache_dir": cache_dir}


@cli.command("download-sites")
@click.option("--overwrite", is_flag=True, help="Download the raw file again")
@with_dataset()
def download_sites(dataset: WhsDataset, overwrite: bool):
    """Download the UNESCO list of sites and convert it to JSON."""
    dataset.download_sites(overwrite=overwrite)
    sites = dataset.load_sites()
    click.echo(f"{len(sites)} sites in {dataset.store.site_list_path}")


@cli.command("download-articles")
@click.option("--overwrite", is_flag=True, help="Scrape the list articles again")
@click.option(
    "-r",
    "--region",
    "regions",
    multiple=True,
    type=click.Choice(CONTINENTS),
    help="Region to scrape (repeatable, default: all)",
)
@with_dataset()
def download_articles(dataset: WhsDataset, overwrite: bool, regions):
    """Scrape the Wikipedia lists of sites of every region."""
    regions = list(regions) or CONTINENTS
    built = dataset.download_whs_articles(
        overwrite=overwrite,
        regions=tqdm(regions, desc="Scraping regions"),
    )
    if not built:
        click.echo("Articles list already present, use --overwrite to rebuild.")

    articles = dataset.load_whs_articles()
    n_titles = sum(len(titles) for titles in articles.values())
    click.echo(
        f"{len(articles)} sites, {n_titles} articles in {dataset.store.articles_path}"
    )


@cli.command()
@click.argument("title")
@click.option("--refresh", is_flag=True, help="Download even if cached")
@with_dataset()
def markup(dataset: WhsDataset, title: str, refresh: bool):
    """Print the wiki markup of an article.

    TITLE: Wikipedia article title.
    """
    click.echo(dataset.get_markup(title, refresh=refresh))


@cli.command()
@click.argument("title")
@with_dataset()
def redirect(dataset: WhsDataset, title: str):
    """Show where an article redirects to.

    TITLE: Wikipedia article title.
    """
    text = dataset.get_markup(title)
    if is_redirect(text):
        click.echo(get_redirect(text))
    else:
        click.echo(f"'{title}' is not a redirect.")


@cli.command("whs-id")
@click.argument("titles", nargs=-1, required=True)
@with_dataset()
def whs_id(dataset: WhsDataset, titles):
    """Print the WHS id number found in each article.

    TITLES: Wikipedia article titles.
    """
    for title in titles:
        id_number = dataset.get_whs_id(title)
        click.echo(f"{title}\t{id_number if id_number is not None else 'NA'}")


@cli.command()
@click.argument("titles", nargs=-1, required=True)
@click.option("--lang", default="", help="Language code (default: all)")
@with_dataset(translation_cache=True)
def translate(dataset: WhsDataset, titles, lang: str):
    """Print the titles of articles in other languages.

    TITLES: English Wikipedia article titles.
    """
    for title in titles:
        result = dataset.get_article_translation(title, lang=lang)
        if isinstance(result, dict):
            click.echo(f"{title}:")
            for code, text in sorted(result.items()):
                click.echo(f"  {code}: {text}")
        else:
            click.echo(f"{title}\t{result if result is not None else 'NA'}")


@cli.command()
@click.argument("text")
@click.argument("alternatives", nargs=-1, required=True)
def closest(text: str, alternatives):
    """Print the alternative closest to TEXT by edit distance."""
    click.echo(get_closest(text, list(alternatives)))


@cli.command()
@click.option(
    "-c",
    "--category",
    "categories",
    multiple=True,
    help="Category to scan (repeatable, default: WHS categories)",
)
@click.option("--depth", default=2, show_default=True, help="Subcategory depth")
@with_dataset()
def categories(dataset: WhsDataset, categories, depth: int):
    """List articles categorised as World Heritage Sites."""
    titles = dataset.get_category_articles(
        list(categories) or WHS_CATEGORIES, depth=depth
    )
    for title in titles:
        click.echo(title)
    click.echo(f"{len(titles)} articles", err=True)


@cli.command()
@click.option(
    "-o", "--output", default=None, help="Output JSON file (prints to stdout if not set)"
)
@with_dataset()
def link(dataset: WhsDataset, output: Optional[str]):
    """Pair scraped site articles with the WHS ids in their infoboxes.

    Requires the articles list built by download-articles.
    """
    if not dataset.store.articles_path.exists():
        click.echo("No articles list found, run download-articles first.", err=True)
        sys.exit(1)

    articles = dataset.load_whs_articles()
    records = []
    for site in tqdm(articles, desc="Linking articles"):
        records.extend(dataset.link_articles({site: articles[site]}))

    text = json.dumps(records, indent=2, ensure_ascii=False)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        missing = sum(1 for r in records if r["id_number"] is None)
        click.echo(f"Wrote {len(records)} records to {output} ({missing} without id)")
    else:
        click.echo(text)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
