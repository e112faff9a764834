"""MIXIN contract CLI — validate and describe contract classes.

Commands
- ``mixin check MODULE:ATTR`` validates that the referenced class can be
  wrapped in a `Mixin`.
- ``mixin inspect MODULE:ATTR`` lists its static and instance surface.

Behavior
- Status lines go to **stderr**; ``inspect`` writes its listing (or JSON
  document with ``--json``) to **stdout**.
- A reference that cannot be imported is a usage error (exit 2). A class that
  is not a valid contract exits 1 with the violated precondition.
- Accessors that are ambiguous under arity dispatch are reported according to
  ``MIXIN_AMBIGUOUS_ACCESSORS`` (``warn``/``error``/``ignore``).
"""

from __future__ import annotations

import json
from typing import Any

import click

from mixin import config
from mixin.core import Mixin
from mixin.descriptors import is_ambiguous_accessor, member_kind
from mixin.errors import MixinError

from .helpers import OBJECT_REF, error, success, warn


def _describe(obj: Any) -> str:
    module = getattr(obj, "__module__", None)
    qualname = getattr(obj, "__qualname__", None) or repr(obj)
    return f"{module}:{qualname}" if module else qualname


def _policy() -> config.AccessorPolicy:
    try:
        return config.get_accessor_policy()
    except config.InvalidAccessorPolicyError as e:
        raise click.ClickException(str(e)) from e


def _wrap(ctx: click.Context, obj: Any) -> Mixin:
    try:
        return Mixin(obj)
    except MixinError as e:
        error(f"{_describe(obj)}: {e}")
        ctx.exit(1)


def _ambiguous(definition: Mixin) -> list[str]:
    return [
        name
        for name, descriptor in definition.instance_surface.items()
        if is_ambiguous_accessor(descriptor)
    ]


@click.command()
@click.argument("contract", type=OBJECT_REF)
@click.pass_context
def check(ctx: click.Context, contract: Any) -> None:
    """Validate that CONTRACT can be wrapped in a Mixin."""
    policy = _policy()
    definition = _wrap(ctx, contract)
    name = _describe(contract)

    ambiguous = _ambiguous(definition)
    for member in ambiguous:
        message = f"{name}.{member} has a setter with an optional value"
        if policy == "error":
            error(message)
        elif policy == "warn":
            warn(message)
    if ambiguous and policy == "error":
        ctx.exit(1)

    success(
        f"{name} is a valid contract "
        f"({len(definition.static_surface)} static, "
        f"{len(definition.instance_surface)} instance members)"
    )


@click.command()
@click.argument("contract", type=OBJECT_REF)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Write the surface as a JSON document to stdout.",
)
@click.pass_context
def inspect(ctx: click.Context, contract: Any, as_json: bool) -> None:
    """List the static and instance surface of CONTRACT."""
    definition = _wrap(ctx, contract)
    ambiguous = set(_ambiguous(definition))

    static = [
        {"name": name, "kind": member_kind(descriptor)}
        for name, descriptor in definition.static_surface.items()
    ]
    instance = [
        {
            "name": name,
            "kind": member_kind(descriptor),
            "ambiguous": name in ambiguous,
        }
        for name, descriptor in definition.instance_surface.items()
    ]

    if as_json:
        document = {
            "contract": _describe(contract),
            "static": static,
            "instance": instance,
        }
        click.echo(json.dumps(document, indent=2))
        return

    click.echo(_describe(contract))
    for title, members in (("Static surface", static), ("Instance surface", instance)):
        click.echo(f"{title}:")
        if not members:
            click.echo("  <none>")
        width = max((len(m["name"]) for m in members), default=0)
        for member in members:
            flag = " (ambiguous)" if member.get("ambiguous") else ""
            click.echo(f"  {member['name']:<{width}}  {member['kind']}{flag}")
