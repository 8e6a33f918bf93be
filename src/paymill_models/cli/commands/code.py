"""Response code lookup command."""

import click

from paymill_models.domain.response_codes import describe_response_code, is_success


@click.command("code")
@click.argument("response_code", type=int, metavar="CODE")
def describe_code(response_code: int):
    """Describe a transaction response code.

    Examples:
        paymill-models code 20000
        paymill-models code 50102
    """
    status = "success" if is_success(response_code) else "failure"
    click.echo(f"{response_code}: {describe_response_code(response_code)} ({status})")


def register_commands(cli):
    """Register response code command with main CLI."""
    cli.add_command(describe_code)
