"""CLI entry point for recipe-measures."""

from dataclasses import replace

import click

from .config import APP_NAME, configure_logging, get_default_servings
from .formatting import format_cooking_number, pretty_fraction
from .recipe import Recipe, RecipeError, load_recipe
from .scaler import format_scale_info, update_servings
from .units import normalize_unit


def display_recipe(recipe: Recipe, scaled_info: str | None = None) -> None:
    """Display a recipe with its rendered ingredient lines."""
    click.echo()
    click.echo("=" * 60)
    click.echo(recipe.title)
    click.echo("=" * 60)

    if recipe.publisher:
        click.echo(f"By: {recipe.publisher}")
    if recipe.cooking_time:
        click.echo(f"Cooking time: {recipe.cooking_time} minutes")
    if recipe.servings:
        click.echo(f"Servings: {recipe.servings}")
    if scaled_info:
        click.echo(f"Scaling: {scaled_info}")
    if recipe.user_generated:
        click.echo("(Your own recipe)")

    click.echo("\nIngredients:")
    for i, ing in enumerate(recipe.ingredients, 1):
        click.echo(f"  {i}. {ing}")

    if recipe.source_url:
        click.echo(f"\nDirections: {recipe.source_url}")
    click.echo()


# ============================================================================
# Main CLI Group
# ============================================================================


@click.group()
@click.version_option(version="1.0.0", prog_name=APP_NAME)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Show recipe ingredient quantities as friendly cooking measurements.

    Formats decimals as kitchen fractions, picks readable volume units,
    and rescales recipes to a new number of servings.
    """
    configure_logging("DEBUG" if verbose else None)


# ============================================================================
# Quantity Commands
# ============================================================================


@cli.command("format", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.option(
    "--style",
    type=click.Choice(["cooking", "pretty"]),
    default="cooking",
    show_default=True,
    help="Fraction style: cooking fractions or denominators 2/3/4",
)
def format_cmd(value: str, style: str):
    """Format a number as a cooking fraction.

    Examples:

    \b
        recipe-measures format 0.333
        recipe-measures format 1.75 --style pretty
    """
    formatter = pretty_fraction if style == "pretty" else format_cooking_number
    click.echo(formatter(value))


@cli.command("normalize", context_settings={"ignore_unknown_options": True})
@click.argument("quantity", type=float)
@click.argument("unit", required=False, default="")
def normalize_cmd(quantity: float, unit: str):
    """Show a quantity in the most readable unit.

    Examples:

    \b
        recipe-measures normalize 1.5 tbsp
        recipe-measures normalize 0.0625 cups
        recipe-measures normalize 200 g
    """
    click.echo(str(normalize_unit(quantity, unit)))


# ============================================================================
# Recipe Commands
# ============================================================================


@cli.command("show")
@click.argument("recipe_file", type=click.Path(dir_okay=False))
@click.option("--servings", "-S", type=int, help="Scale to target servings")
@click.option("--exact", is_flag=True, help="Don't round scaled quantities to cooking fractions")
def show_cmd(recipe_file: str, servings: int | None, exact: bool):
    """Show a recipe file with friendly ingredient quantities.

    Examples:

    \b
        recipe-measures show pizza.json
        recipe-measures show pizza.json --servings 2
    """
    try:
        recipe = load_recipe(recipe_file)
    except RecipeError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    if recipe.servings is None:
        default_servings = get_default_servings()
        if default_servings is not None:
            recipe = replace(recipe, servings=default_servings)

    if servings is None:
        display_recipe(recipe)
        return

    try:
        scaled = update_servings(recipe, servings, round_to_cooking=not exact)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        raise SystemExit(1) from None

    display_recipe(scaled, format_scale_info(recipe.servings, scaled.servings))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
