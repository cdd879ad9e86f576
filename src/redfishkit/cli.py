# src/redfishkit/cli.py
"""
redfishkit Command Line Interface (CLI).

This module implements a small terminal front-end over the client binding
using `typer` and `rich`. It is meant for poking at a live service: reading a
resource, walking a collection, and committing a few property changes.

Features
--------
- **get**: Print any resource as JSON.
- **list**: Fetch every member of a collection; failed members are shown in
  their own table instead of aborting the listing.
- **set**: Assign properties and commit them with a minimal PATCH.
- **reset**: Reset a computer system.

Usage
-----
    $ redfishkit --endpoint https://bmc --username root get /redfish/v1/Systems/1
    $ redfishkit list /redfish/v1/PowerEquipment/RackPDUs/1/Branches --kind circuit
    $ redfishkit set /redfish/v1/Systems/1 AssetTag=rack-12 --kind system
"""

from __future__ import annotations

import json
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from redfishkit.core.entity import Entity, MutableEntity
from redfishkit.core.errors import RedfishError
from redfishkit.core.settings import load_settings
from redfishkit.schema import (
    Chassis,
    Circuit,
    ComputerSystem,
    Manager,
    Outlet,
    PowerDistribution,
    Sensor,
)
from redfishkit.schema.common import ResetType
from redfishkit.transport.base import Client
from redfishkit.transport.http import HTTPClient

# Ensure REDFISH_* variables from .env are visible before settings are read
load_dotenv()

app = typer.Typer(
    help="redfishkit: inspect and update resources of a Redfish service.",
    rich_markup_mode="markdown",
)
console = Console()

KINDS: dict[str, type[Entity]] = {
    "resource": Entity,
    "system": ComputerSystem,
    "chassis": Chassis,
    "manager": Manager,
    "pdu": PowerDistribution,
    "circuit": Circuit,
    "outlet": Outlet,
    "sensor": Sensor,
}

KindOption = Annotated[
    str,
    typer.Option("--kind", "-k", help=f"Resource type: {', '.join(KINDS)}."),
]


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _build_client(
    endpoint: str | None,
    username: str | None,
    password: str | None,
    insecure: bool | None,
) -> Client:
    """Helper: Build the HTTP transport, letting CLI options override settings."""
    base = HTTPClient.from_settings(load_settings())
    if endpoint:
        base.endpoint = endpoint
    if username:
        base.username = username
    if password:
        base.password = password
    if insecure is not None:
        base.insecure = insecure
    return base


def _model_for(kind: str) -> type[Entity]:
    try:
        return KINDS[kind.lower()]
    except KeyError:
        raise typer.BadParameter(f"unknown kind {kind!r}; choose from {', '.join(KINDS)}") from None


def _parse_assignment(model: type[Entity], text: str) -> tuple[str, Any]:
    """Helper: Turn ``Field=value`` into ``(attribute, value)``.

    ``Field`` may be the wire name (``AssetTag``) or the attribute name
    (``asset_tag``). ``value`` is read as JSON when it parses, else as a string.
    """
    if "=" not in text:
        raise typer.BadParameter(f"expected FIELD=VALUE, got {text!r}")
    key, raw = text.split("=", 1)
    attr = next(
        (name for name, info in model.model_fields.items() if key in (name, info.alias)),
        None,
    )
    if attr is None:
        raise typer.BadParameter(f"{model.__name__} has no field {key!r}")
    try:
        value: Any = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return attr, value


def _fail(message: str, exc: Exception) -> typer.Exit:
    console.print(f"\n[bold red]❌ {message}:[/bold red] {exc}")
    return typer.Exit(code=1)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.callback()  # type: ignore[misc]
def main(
    ctx: typer.Context,
    endpoint: Annotated[
        str | None,
        typer.Option("--endpoint", "-e", help="Service base URL (default: REDFISH_ENDPOINT)."),
    ] = None,
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="Basic-auth user (default: REDFISH_USERNAME)."),
    ] = None,
    password: Annotated[
        str | None,
        typer.Option("--password", "-p", help="Basic-auth password (default: REDFISH_PASSWORD)."),
    ] = None,
    insecure: Annotated[
        bool | None,
        typer.Option("--insecure/--verify", help="Skip TLS certificate verification."),
    ] = None,
) -> None:
    """Connect options shared by every command."""
    ctx.obj = _build_client(endpoint, username, password, insecure)


@app.command()  # type: ignore[misc]
def get(
    ctx: typer.Context,
    uri: Annotated[str, typer.Argument(help="Resource URI, e.g. /redfish/v1/Systems/1.")],
) -> None:
    """Fetch one resource and print it as JSON."""
    try:
        response = ctx.obj.get(uri)
    except RedfishError as e:
        raise _fail("Request Error", e) from e
    console.print_json(response.body.decode("utf-8"))


@app.command("list")  # type: ignore[misc]
def list_members(
    ctx: typer.Context,
    link: Annotated[str, typer.Argument(help="Collection URI.")],
    kind: KindOption = "resource",
) -> None:
    """
    Fetch every member of a collection.

    Members that fail are reported individually; the command exits 1 when any
    member failed, after printing everything that succeeded.
    """
    model = _model_for(kind)
    try:
        result = model.list_referenced(ctx.obj, link)
    except RedfishError as e:
        raise _fail("Collection Error", e) from e

    if result.is_ok():
        items, failures = result.unwrap(), {}
    else:
        error = result.unwrap_err()
        items, failures = error.items, error.failures

    table = Table(title=f"{link} ({len(items)} fetched)")
    table.add_column("URI", style="cyan")
    table.add_column("Id")
    table.add_column("Name")
    for item in items:
        table.add_row(item.odata_id, item.id, item.name)
    console.print(table)

    if failures:
        failed = Table(title=f"{len(failures)} failed", border_style="red")
        failed.add_column("URI", style="red")
        failed.add_column("Error")
        for uri, exc in failures.items():
            failed.add_row(uri, str(exc))
        console.print(failed)
        raise typer.Exit(code=1)


@app.command("set")  # type: ignore[misc]
def set_fields(
    ctx: typer.Context,
    uri: Annotated[str, typer.Argument(help="Resource URI.")],
    assignments: Annotated[list[str], typer.Argument(help="FIELD=VALUE pairs.")],
    kind: KindOption = "system",
) -> None:
    """Assign properties on a resource and commit only what changed."""
    model = _model_for(kind)
    if not issubclass(model, MutableEntity):
        raise typer.BadParameter(f"{model.__name__} has no writable properties")

    parsed = [_parse_assignment(model, text) for text in assignments]
    try:
        resource = model.get(ctx.obj, uri)
        for attr, value in parsed:
            setattr(resource, attr, value)
        payload = resource.patch_payload()
        resource.update()
    except (RedfishError, ValidationError) as e:
        raise _fail("Update Error", e) from e

    if not payload:
        console.print("[dim]Nothing to update: no writable property changed.[/dim]")
        return
    console.print(Panel(json.dumps(payload, indent=2), title="PATCH", border_style="green"))


@app.command()  # type: ignore[misc]
def reset(
    ctx: typer.Context,
    uri: Annotated[str, typer.Argument(help="ComputerSystem URI.")],
    reset_type: Annotated[
        ResetType,
        typer.Option("--type", "-t", help="Redfish ResetType value."),
    ] = ResetType.GRACEFUL_RESTART,
) -> None:
    """Reset a computer system."""
    try:
        system = ComputerSystem.get(ctx.obj, uri)
        system.reset(reset_type)
    except (RedfishError, ValueError) as e:
        raise _fail("Reset Error", e) from e
    console.print(f"[bold green]✅ {reset_type.value}[/bold green] sent to {system.odata_id}")


if __name__ == "__main__":
    app()
