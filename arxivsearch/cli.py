# arxivsearch/cli.py
import asyncio
import logging
import sys
from pathlib import Path
from typing import Annotated

import cyclopts
import httpx

from arxivsearch.export import get_exporter
from arxivsearch.feed import FeedError
from arxivsearch.query import QueryBuilder
from arxivsearch.search import search as do_search

app = cyclopts.App(
    name="arxivsearch",
    help="Search arXiv by author, category, title and abstract.",
)

AuthorOpt = Annotated[
    list[str],
    cyclopts.Parameter(name=["--author", "-a"], help="Author name (repeatable)"),
]
CategoryOpt = Annotated[
    list[str],
    cyclopts.Parameter(name=["--category", "-c"], help="arXiv category, e.g. cs.LG (repeatable)"),
]
TitleOpt = Annotated[
    str,
    cyclopts.Parameter(name="--title", help="Words that must appear in the title"),
]
AbstractOpt = Annotated[
    str,
    cyclopts.Parameter(name="--abstract", help="Words that must appear in the abstract"),
]


def _make_builder(
    authors: list[str], categories: list[str], title: str, abstract: str
) -> QueryBuilder:
    builder = (
        QueryBuilder()
        .add_authors(authors)
        .add_categories(categories)
        .set_title(title)
        .set_abstract(abstract)
    )
    for code in builder.rejected_categories:
        print(f"[WARN] Unknown category ignored: {code}", file=sys.stderr)
    return builder


@app.command(name="query")
def query(
    authors: AuthorOpt = [],
    categories: CategoryOpt = [],
    title: TitleOpt = "",
    abstract: AbstractOpt = "",
) -> None:
    """Print the search query string without contacting arXiv."""
    print(_make_builder(authors, categories, title, abstract).build())


@app.command(name="search")
def search(
    authors: AuthorOpt = [],
    categories: CategoryOpt = [],
    title: TitleOpt = "",
    abstract: AbstractOpt = "",
    start: Annotated[
        int,
        cyclopts.Parameter(name="--start", help="Offset of the first result"),
    ] = 0,
    max_results: Annotated[
        int,
        cyclopts.Parameter(name=["--max", "-n"], help="Maximum number of results"),
    ] = 10,
    sort_by: Annotated[
        str,
        cyclopts.Parameter(
            name="--sort-by", help="Sort key: relevance, lastUpdatedDate, submittedDate"
        ),
    ] = "relevance",
    sort_order: Annotated[
        str,
        cyclopts.Parameter(name="--sort-order", help="Sort order: descending, ascending"),
    ] = "descending",
    output: Annotated[
        Path | None,
        cyclopts.Parameter(name=["--output", "-o"], help="Output file path"),
    ] = None,
    format: Annotated[
        str,
        cyclopts.Parameter(name=["--format", "-f"], help="Output format: tree, json"),
    ] = "tree",
    verbose: Annotated[
        bool,
        cyclopts.Parameter(name=["--verbose", "-v"], help="Enable debug logging"),
    ] = False,
) -> None:
    """Search arXiv for papers matching all given filters."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    # Validate format early
    try:
        exporter = get_exporter(format)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    builder = _make_builder(authors, categories, title, abstract)
    if builder.is_empty():
        print(
            "Error: No filters given. Use --author, --category, --title or --abstract.",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        result = asyncio.run(
            do_search(
                builder,
                start=start,
                max_results=max_results,
                sort_by=sort_by,
                sort_order=sort_order,
            )
        )
    except (httpx.HTTPError, FeedError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if output:
        exporter.export(result, output)
        print(f"Exported {len(result.papers)} papers to {output}")
    else:
        print(exporter.to_string(result))

    print(f"\nTotal: {len(result.papers)} of {result.total_results} papers", file=sys.stderr)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
