"""Main CLI entry point."""

import logging

import click

from paymill_models.domain.registry import REGISTRY

# Import and register all commands at module level
from paymill_models.cli.commands import code, map_cmd, schema

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (overrides PAYMILL_MODELS_LOG_LEVEL environment variable)",
    envvar="PAYMILL_MODELS_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, log_level: str):
    """paymill-models - Inspect and map payment API payloads.

    Map JSON payloads returned by the payment API onto typed records and
    inspect the schemas of the supported resource kinds.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj.setdefault("registry", REGISTRY)


# Register all commands
schema.register_commands(cli)
map_cmd.register_commands(cli)
code.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
