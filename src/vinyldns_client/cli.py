#!/usr/bin/env python3
"""VinylDNS CLI using the vinyldns-client library."""

import asyncio
import json
import logging
import sys

import click

from .client import VinylDNSClient
from .exceptions import VinylDNSError
from .models import Group, Model, Zone


def _echo_result(result):
    if isinstance(result, Model):
        result = result.to_dict()
    elif isinstance(result, list):
        result = [item.to_dict() for item in result]
    click.echo(json.dumps(result, indent=2))


def _run(operation):
    """Run ``operation(client)`` and print its result as JSON."""

    async def _call(client):
        async with client:
            return await operation(client)

    try:
        client = VinylDNSClient.from_env()
        result = asyncio.run(_call(client))
    except VinylDNSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _echo_result(result)


@click.group()
@click.version_option(package_name="vinyldns-client")
@click.option(
    "--log-level",
    envvar="VINYLDNS_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
def cli(log_level):
    """VinylDNS CLI - A command line interface for VinylDNS."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def list_groups():
    """List the groups you belong to."""
    _run(lambda client: client.list_groups())


@cli.command()
@click.option("-n", "--name", required=True, help="Group name")
@click.option("-e", "--email", required=True, help="Group contact email")
@click.option("-d", "--description", help="Group description")
def create_group(name, email, description):
    """Create a new group."""
    group = Group(name=name, email=email, description=description)
    _run(lambda client: client.create_group(group))


@cli.command()
@click.option("-i", "--id", "group_id", required=True, help="Group ID")
def delete_group(group_id):
    """Delete a group."""
    _run(lambda client: client.delete_group(group_id))


@cli.command()
def list_zones():
    """List the zones you have access to."""
    _run(lambda client: client.list_zones())


@cli.command()
@click.option("-n", "--name", required=True, help="Zone name")
@click.option("-e", "--email", required=True, help="Zone contact email")
@click.option(
    "-a", "--admin-group-id", required=True, help="ID of the zone's admin group"
)
def create_zone(name, email, admin_group_id):
    """Create a new test zone."""
    zone = Zone(name=name, email=email, admin_group_id=admin_group_id, is_test=True)
    _run(lambda client: client.create_zone(zone))


@cli.command()
@click.option("-i", "--id", "zone_id", required=True, help="Zone ID")
def get_record_sets(zone_id):
    """List the record sets in a zone."""

    async def _list(client):
        return [record_set async for record_set in client.iter_record_sets(zone_id)]

    _run(_list)


for _alias, _command in [
    ("lg", list_groups),
    ("cg", create_group),
    ("dg", delete_group),
    ("lz", list_zones),
    ("cz", create_zone),
    ("gr", get_record_sets),
]:
    cli.add_command(_command, name=_alias)


if __name__ == "__main__":
    cli()
