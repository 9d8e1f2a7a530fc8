import logging
from pathlib import Path

import click

from portal.infrastructure.bootstrap import build_portal
from portal.infrastructure.cli.order_commands import (
    order_create,
    order_export,
    order_list,
    order_seed,
    order_show,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="PORTAL_DATA_DIR",
    default=None,
    help="Directory holding orders.json.",
)
@click.option(
    "--export-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="PORTAL_EXPORT_DIR",
    default=None,
    help="Directory that receives exported PDFs.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, export_dir: Path | None, verbose: bool) -> None:
    """Food Retailer — Distributor Portal"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    portal = build_portal(data_dir, export_dir)
    ctx.obj = portal
    ctx.call_on_close(portal.close)


@cli.group()
def order() -> None:
    """Manage distributor orders."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_export)
order.add_command(order_list)
order.add_command(order_seed)
order.add_command(order_show)
