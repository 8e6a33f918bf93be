"""Schema inspection commands."""

import click

from paymill_models.cli.error_handling import handle_domain_error
from paymill_models.domain.entities import FieldKind
from paymill_models.domain.errors import DomainError


@click.command("kinds")
@click.pass_context
def list_kinds(ctx):
    """List the supported resource kinds."""
    registry = ctx.obj["registry"]
    for kind in registry.kinds():
        click.echo(kind)


@click.command("schema")
@click.argument("kind", metavar="KIND")
@click.pass_context
def show_schema(ctx, kind: str):
    """Show the fields of a resource kind.

    Examples:
        paymill-models schema transaction
        paymill-models schema Refund
    """
    registry = ctx.obj["registry"]
    try:
        schema = registry.get(kind)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n{schema.name}:")
    click.echo("-" * 60)
    for field in schema.fields:
        if field.kind is FieldKind.SCALAR:
            type_name = field.scalar_type.value
        else:
            type_name = f"{field.kind.value} ({field.schema.name})"
        required = " [required]" if field.required else ""
        click.echo(f"{field.wire_key:22s} | {type_name}{required}")


def register_commands(cli):
    """Register schema commands with main CLI."""
    cli.add_command(list_kinds)
    cli.add_command(show_schema)
