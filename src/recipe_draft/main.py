"""
Recipe Draft - CLI Entry Point.

Usage:
    recipe-draft import URL      Import a recipe draft from a web page
    recipe-draft parse FILE      Run the pipeline on a saved HTML file
    recipe-draft --help          Show help
"""

import asyncio
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from recipe_draft.models import ExtractionResult, RawPage

app = typer.Typer(
    name="recipe-draft",
    help="Recipe Draft - turn recipe web pages into editable recipe drafts.",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Setup logging on stderr so stdout stays clean."""
    from recipe_draft.config import settings

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Quiet down noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def show_result(result: ExtractionResult) -> None:
    """Print a draft, or the reason there is none."""
    if not result.success:
        error = result.error
        kind = error.kind.value if error else "unknown"
        console.print(f"\n[red]❌ Import failed ({kind}): {error}[/red]")
        if result.fallback_message:
            console.print(f"[dim]{result.fallback_message}[/dim]")
        raise typer.Exit(1)

    recipe = result.recipe
    summary = Table.grid(padding=(0, 2))
    summary.add_row("Method", result.method.value)
    summary.add_row("Confidence", f"{recipe.confidence:.0%}")
    summary.add_row("Category", recipe.category or "-")
    summary.add_row("Difficulty", recipe.difficulty or "-")
    summary.add_row("Cuisine", recipe.cuisine or "-")
    summary.add_row("Prep / cook", f"{recipe.prep_time or '-'} / {recipe.cook_time or '-'} min")
    summary.add_row("Servings", str(recipe.servings or "-"))
    console.print(Panel.fit(summary, title=f"[bold green]{recipe.name}[/bold green]", border_style="green"))

    if recipe.description:
        console.print(f"\n[italic]{recipe.description}[/italic]")

    ingredients = Table(title="Ingredients", show_lines=False)
    ingredients.add_column("Line")
    ingredients.add_column("Catalog match")
    ingredients.add_column("Group", style="dim")
    for item in recipe.matched_ingredients:
        ingredients.add_row(item.raw, item.canonical or f"[dim]{item.normalized}[/dim]", item.catalog_group or "")
    console.print(ingredients)

    console.print("\n[bold]Instructions[/bold]")
    for number, step in enumerate(recipe.instructions, start=1):
        console.print(f"  {number}. {step}")


@app.command("import")
def import_url(
    url: str = typer.Argument(..., help="Recipe page URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Fetch a recipe page and print the extracted draft."""
    from recipe_draft.recipe_import import import_from

    setup_logging(verbose)
    with console.status("Importing..."):
        result = asyncio.run(import_from(url))
    show_result(result)


@app.command()
def parse(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved HTML page"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Run the extraction pipeline on a saved HTML file (no network)."""
    from recipe_draft.recipe_import import parse_page

    setup_logging(verbose)
    raw = RawPage(url=path.resolve().as_uri(), status_code=200, body=path.read_bytes())
    show_result(parse_page(raw))


@app.command()
def version() -> None:
    """Show version information."""
    from recipe_draft import __version__

    console.print(f"Recipe Draft version {__version__}")


if __name__ == "__main__":
    app()
