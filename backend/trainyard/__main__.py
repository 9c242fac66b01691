"""
Training Yard developer tools.

Usage:
    python -m trainyard worlds
    python -m trainyard validate classic-village
"""
import logging
import sys

import click

from trainyard.config import get_log_level, get_world_id


def setup_logging(debug: bool = False) -> None:
    """Configure console logging."""
    log_level = logging.DEBUG if debug else getattr(logging, get_log_level(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s | %(message)s', datefmt='%H:%M:%S')
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--worlds-dir', type=click.Path(exists=True, file_okay=False),
              default=None, help='Path to worlds directory')
@click.pass_context
def cli(ctx: click.Context, debug: bool, worlds_dir: str | None):
    """Training Yard world tools."""
    setup_logging(debug=debug)
    ctx.obj = {"worlds_dir": worlds_dir}


@cli.command()
@click.pass_context
def worlds(ctx: click.Context):
    """List available worlds."""
    from trainyard.engine.world import WorldLoader

    for world in WorldLoader(ctx.obj["worlds_dir"]).list_worlds():
        click.echo(f"{world['id']}: {world['name']}")


@cli.command()
@click.argument('world_id', required=False)
@click.pass_context
def validate(ctx: click.Context, world_id: str | None):
    """Validate a world definition for consistency."""
    from trainyard.engine.validator import validate_world

    world_id = world_id or get_world_id()
    try:
        result = validate_world(world_id, ctx.obj["worlds_dir"])
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"\n{'='*60}")
    click.echo(f"World Validation: {world_id}")
    click.echo(f"{'='*60}\n")

    if result.errors:
        click.echo(f"ERRORS ({len(result.errors)}):")
        for error in result.errors:
            click.echo(f"  ❌ {error}")
        click.echo()

    if result.warnings:
        click.echo(f"WARNINGS ({len(result.warnings)}):")
        for warning in result.warnings:
            click.echo(f"  ⚠️  {warning}")
        click.echo()

    if result.is_valid:
        click.echo("✅ World is valid!")
        if result.warnings:
            click.echo(f"   (but has {len(result.warnings)} warning(s))")
    else:
        click.echo(f"❌ World has {len(result.errors)} error(s)")

    sys.exit(0 if result.is_valid else 1)


if __name__ == "__main__":
    cli()
