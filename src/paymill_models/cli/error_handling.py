"""CLI error handling helpers."""

import click

from paymill_models.domain.errors import DomainError, SchemaMismatchError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, SchemaMismatchError) and error.path:
        click.echo(f"  at {error.path}", err=True)
    ctx.exit(1)
