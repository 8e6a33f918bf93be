"""Payload mapping command."""

import json
from collections.abc import Mapping

import click

from paymill_models.cli.error_handling import handle_domain_error
from paymill_models.domain.entities import NOT_SET, Record
from paymill_models.domain.errors import DomainError
from paymill_models.domain.response_codes import describe_response_code
from paymill_models.mapping.mapper import map_list, map_payload
from paymill_models.mapping.response import ListResponse, ResponseHandler
from paymill_models.mapping.serializer import to_payload
from paymill_models.utils.amount_parser import format_amount
from paymill_models.utils.date_parser import format_timestamp

TIMESTAMP_FIELDS = frozenset(
    {
        "created_at",
        "updated_at",
        "billed_at",
        "billing_date",
        "period_from",
        "period_until",
        "last_reminder_date",
        "trial_start",
        "trial_end",
        "next_capture_at",
        "canceled_at",
    }
)
AMOUNT_FIELDS = frozenset({"amount", "origin_amount", "fee_amount", "netto", "brutto"})


def _describe_value(record: Record, name: str, value) -> str:
    """Render a scalar, annotating amounts, timestamps and response codes."""
    if value is None:
        return "null"
    rendered = repr(value) if isinstance(value, str) else str(value)
    try:
        if name in TIMESTAMP_FIELDS:
            return f"{rendered} ({format_timestamp(value)})"
        if name in AMOUNT_FIELDS and record.schema.has_field("currency"):
            return f"{rendered} ({format_amount(value, record.get('currency') or None)})"
    except ValueError:
        return rendered
    if name == "response_code":
        return f"{rendered} ({describe_response_code(value)})"
    return rendered


def render_record(record: Record, indent: int = 0) -> list[str]:
    """Render the set fields of a record as indented lines."""
    pad = "  " * indent
    lines = []
    for name, value in record.items():
        if value is NOT_SET:
            continue
        if isinstance(value, Record):
            lines.append(f"{pad}{name}: <{value.kind}>")
            lines.extend(render_record(value, indent + 1))
        elif isinstance(value, list) and record.schema.field(name).kind.is_nested:
            lines.append(f"{pad}{name}: [{len(value)}]")
            for index, item in enumerate(value):
                lines.append(f"{pad}  [{index}] <{item.kind}>")
                lines.extend(render_record(item, indent + 2))
        else:
            lines.append(f"{pad}{name}: {_describe_value(record, name, value)}")
    return lines


def _map_body(registry, kind: str, body) -> list[Record]:
    """Map a decoded document, unwrapping API envelopes when present."""
    if isinstance(body, Mapping) and ("data" in body or "error" in body):
        response = ResponseHandler(registry).convert(kind, body)
        if isinstance(response, ListResponse):
            return response.data
        return [response.data]

    schema = registry.get(kind)
    if isinstance(body, list):
        return map_list(schema, body)
    return [map_payload(schema, body)]


@click.command("map")
@click.argument("kind", metavar="KIND")
@click.argument("payload_file", type=click.File("r"), metavar="FILE")
@click.option("--json", "as_json", is_flag=True, help="Print the mapped records as JSON")
@click.pass_context
def map_file(ctx, kind: str, payload_file, as_json: bool):
    """Map a JSON payload file onto records of KIND.

    FILE may hold a single resource, a list of resources, or a full API
    response with a 'data' entry. Use '-' to read from standard input.

    Examples:
        paymill-models map transaction response.json
        cat refunds.json | paymill-models map refund - --json
    """
    registry = ctx.obj["registry"]

    try:
        body = json.load(payload_file)
    except json.JSONDecodeError as e:
        click.echo(f"Error: Invalid JSON in {payload_file.name}: {e}", err=True)
        ctx.exit(1)

    try:
        records = _map_body(registry, kind, body)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if as_json:
        payloads = [to_payload(record) for record in records]
        output = payloads if isinstance(body, list) or len(payloads) != 1 else payloads[0]
        click.echo(json.dumps(output, indent=2, sort_keys=True))
        return

    if not records:
        click.echo(f"No {kind} records found.")
        return

    for record in records:
        click.echo(f"\n{record.kind}:")
        click.echo("-" * 60)
        for line in render_record(record):
            click.echo(line)


def register_commands(cli):
    """Register map command with main CLI."""
    cli.add_command(map_file)
