"""CLI commands for seed data files."""

from __future__ import annotations

from pathlib import Path

import click

from grubdash.domain.exceptions import DomainException
from grubdash.domain.model.order import OrderStatus
from grubdash.infrastructure.persistence.seed import load_dishes, load_orders

_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command("check")
@click.option("--dishes", "dishes_path", type=_PATH, help="Dish seed file (JSON array).")
@click.option("--orders", "orders_path", type=_PATH, help="Order seed file (JSON array).")
def seed_check(dishes_path: Path | None, orders_path: Path | None) -> None:
    """Validate seed files against the dish and order rules."""
    if dishes_path is None and orders_path is None:
        raise click.UsageError("Pass --dishes and/or --orders.")

    try:
        if dishes_path is not None:
            dishes = load_dishes(dishes_path)
            click.echo(f"{dishes_path}: {len(dishes)} dish(es) OK")
        if orders_path is not None:
            orders = load_orders(orders_path)
            click.echo(f"{orders_path}: {len(orders)} order(s) OK")
            for status in OrderStatus:
                count = sum(1 for o in orders if o.status == status)
                click.echo(f"  {status.value:<20} {count:>5}")
    except DomainException as exc:
        raise click.ClickException(str(exc))
