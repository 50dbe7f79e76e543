import click

from grubdash.infrastructure.cli.seed_commands import seed_check
from grubdash.infrastructure.cli.server_commands import serve


@click.group()
def cli() -> None:
    """GrubDash: dishes and orders API"""


@cli.group()
def seed() -> None:
    """Inspect seed data files."""


# Register subcommands
cli.add_command(serve)
seed.add_command(seed_check)
