"""Schema tables for the API resource kinds.

Each schema lists the wire keys of one resource as the API returns it. API
changes (renamed keys, new nesting) are absorbed here, never in the mapper.
Parent references inside child resources (a refund's transaction, a payment's
client) are plain id strings, so every schema graph is a tree.
"""

from enum import Enum

from paymill_models.domain.entities import Field, FieldKind, ScalarType, Schema

STRING = ScalarType.STRING
INTEGER = ScalarType.INTEGER
BOOLEAN = ScalarType.BOOLEAN
RAW = ScalarType.RAW


def scalar(name: str, scalar_type: ScalarType = STRING, **kwargs) -> Field:
    return Field(name=name, kind=FieldKind.SCALAR, scalar_type=scalar_type, **kwargs)


def nested(name: str, schema: Schema, **kwargs) -> Field:
    return Field(name=name, kind=FieldKind.NESTED, schema=schema, **kwargs)


def nested_nullable(name: str, schema: Schema, **kwargs) -> Field:
    return Field(name=name, kind=FieldKind.NESTED_NULLABLE, schema=schema, **kwargs)


def nested_list(name: str, schema: Schema, **kwargs) -> Field:
    return Field(name=name, kind=FieldKind.NESTED_LIST, schema=schema, **kwargs)


def _resource_meta() -> tuple[Field, ...]:
    """Fields shared by every identifiable resource."""
    return (
        scalar("created_at", INTEGER),
        scalar("updated_at", INTEGER),
        scalar("app_id"),
    )


class TransactionStatus(str, Enum):
    """Status values the API reports for transactions.

    The mapper keeps ``status`` as a plain string; this enum is for callers
    that want to compare against known values.
    """

    OPEN = "open"
    CLOSED = "closed"
    FAILED = "failed"
    PREAUTH = "preauth"
    PENDING = "pending"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"
    CHARGEBACK = "chargeback"


PAYMENT = Schema(
    name="payment",
    fields=(
        scalar("id"),
        scalar("type"),
        scalar("client"),
        scalar("card_type"),
        scalar("country"),
        scalar("expire_month", INTEGER),
        scalar("expire_year", INTEGER),
        scalar("card_holder"),
        scalar("last4"),
        # Direct debit
        scalar("code"),
        scalar("account"),
        scalar("holder"),
        scalar("iban"),
        scalar("bic"),
        *_resource_meta(),
    ),
)

CLIENT = Schema(
    name="client",
    fields=(
        scalar("id"),
        scalar("email"),
        scalar("description"),
        nested_list("payment", PAYMENT),
        scalar("subscription", RAW),
        *_resource_meta(),
    ),
)

PREAUTHORIZATION = Schema(
    name="preauthorization",
    fields=(
        scalar("id"),
        scalar("amount"),
        scalar("currency"),
        scalar("description"),
        scalar("status"),
        scalar("livemode", BOOLEAN),
        nested_nullable("payment", PAYMENT),
        nested_nullable("client", CLIENT),
        scalar("transaction"),
        *_resource_meta(),
    ),
)

REFUND = Schema(
    name="refund",
    fields=(
        scalar("id"),
        scalar("transaction"),
        scalar("amount", INTEGER),
        scalar("status"),
        scalar("description"),
        scalar("livemode", BOOLEAN),
        scalar("response_code", INTEGER),
        *_resource_meta(),
    ),
)

INVOICE = Schema(
    name="invoice",
    fields=(
        scalar("invoice_nr"),
        scalar("netto", INTEGER),
        scalar("brutto", INTEGER),
        scalar("status"),
        scalar("period_from", INTEGER),
        scalar("period_until", INTEGER),
        scalar("currency"),
        scalar("vat_rate", INTEGER),
        scalar("billing_date", INTEGER),
        scalar("invoice_type"),
        scalar("last_reminder_date", INTEGER),
    ),
)

FEE = Schema(
    name="fee",
    fields=(
        scalar("type"),
        scalar("application"),
        scalar("payment"),
        scalar("amount", INTEGER),
        scalar("currency"),
        scalar("billed_at", INTEGER),
    ),
)

TRANSACTION = Schema(
    name="transaction",
    fields=(
        scalar("id"),
        # Smallest currency unit, kept as the string the API sends
        scalar("amount"),
        scalar("origin_amount", INTEGER),
        scalar("status"),
        scalar("description"),
        scalar("livemode", BOOLEAN),
        scalar("currency"),
        scalar("response_code", INTEGER),
        scalar("short_id"),
        scalar("fee_amount", INTEGER),
        scalar("fee_payment"),
        nested_list("refunds", REFUND),
        nested_list("invoices", INVOICE),
        nested_list("fees", FEE),
        nested("payment", PAYMENT),
        nested_nullable("client", CLIENT),
        nested_nullable("preauthorization", PREAUTHORIZATION),
        *_resource_meta(),
    ),
)

OFFER = Schema(
    name="offer",
    fields=(
        scalar("id"),
        scalar("name"),
        scalar("amount"),
        scalar("currency"),
        scalar("interval"),
        scalar("trial_period_days", INTEGER),
        scalar("subscription_count", RAW),
        *_resource_meta(),
    ),
)

SUBSCRIPTION = Schema(
    name="subscription",
    fields=(
        scalar("id"),
        nested_nullable("offer", OFFER),
        scalar("livemode", BOOLEAN),
        scalar("cancel_at_period_end", BOOLEAN),
        scalar("trial_start", INTEGER),
        scalar("trial_end", INTEGER),
        scalar("next_capture_at", INTEGER),
        scalar("canceled_at", INTEGER),
        nested_nullable("payment", PAYMENT),
        nested_nullable("client", CLIENT),
        *_resource_meta(),
    ),
)

WEBHOOK = Schema(
    name="webhook",
    fields=(
        scalar("id"),
        scalar("url"),
        scalar("email"),
        scalar("livemode", BOOLEAN),
        scalar("event_types", RAW),
        scalar("active", BOOLEAN),
        *_resource_meta(),
    ),
)

ALL_SCHEMAS = (
    TRANSACTION,
    PAYMENT,
    CLIENT,
    PREAUTHORIZATION,
    REFUND,
    INVOICE,
    FEE,
    OFFER,
    SUBSCRIPTION,
    WEBHOOK,
)
