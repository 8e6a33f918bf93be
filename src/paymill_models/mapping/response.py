"""Unwrap API response envelopes into records.

Successful responses wrap the resource in ``data`` (an object for single
resources, an array for lists, with ``data_count`` giving the total) next to a
``mode`` of ``live`` or ``test``. Failed calls carry an ``error`` entry.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from paymill_models.domain.entities import Record
from paymill_models.domain.errors import (
    ApiResponseError,
    SchemaMismatchError,
    expected_mapping,
    missing_response_data,
)
from paymill_models.domain.registry import REGISTRY, ModelRegistry
from paymill_models.mapping.mapper import map_list, map_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemResponse:
    """A single mapped resource."""

    data: Record
    mode: Optional[str] = None


@dataclass(frozen=True)
class ListResponse:
    """A page of mapped resources."""

    data: list[Record]
    count: int
    mode: Optional[str] = None


def _error_message(error: Any) -> str:
    if isinstance(error, Mapping):
        messages = error.get("messages", error)
        if isinstance(messages, Mapping):
            return "; ".join(f"{key}: {value}" for key, value in messages.items())
        return str(messages)
    return str(error)


class ResponseHandler:
    """Convert decoded response bodies to records of a given kind."""

    def __init__(self, registry: ModelRegistry = REGISTRY):
        self.registry = registry

    def convert(
        self, kind: str, body: Mapping[str, Any], status_code: Optional[int] = None
    ) -> ItemResponse | ListResponse:
        """Map a decoded response body.

        Args:
            kind: Resource kind the endpoint returns
            body: Decoded JSON body
            status_code: HTTP status of the response, if known

        Returns:
            ItemResponse for single resources, ListResponse for lists

        Raises:
            ApiResponseError: If the body is an error envelope
            SchemaMismatchError: If the body has no data or the data does not fit
            UnknownResourceKindError: If the kind is not registered
        """
        schema = self.registry.get(kind)
        if not isinstance(body, Mapping):
            raise SchemaMismatchError(expected_mapping(kind, body), path=kind)

        if "error" in body:
            message = _error_message(body["error"])
            logger.warning("API error for %s (status %s): %s", kind, status_code, message)
            raise ApiResponseError(
                message, status_code=status_code, exception=body.get("exception")
            )

        if "data" not in body:
            raise SchemaMismatchError(missing_response_data(kind), path=kind)

        data = body["data"]
        mode = body.get("mode")
        if isinstance(data, list):
            records = map_list(schema, data)
            count = body.get("data_count", len(records))
            try:
                count = int(count)
            except (TypeError, ValueError, OverflowError):
                logger.debug("Ignoring invalid data_count %r for %s", count, kind)
                count = len(records)
            return ListResponse(data=records, count=count, mode=mode)

        return ItemResponse(data=map_payload(schema, data), mode=mode)
