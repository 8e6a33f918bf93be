"""Mapping layer between raw API payloads and records."""

from paymill_models.mapping.mapper import FieldMapper, map_list, map_payload
from paymill_models.mapping.response import ItemResponse, ListResponse, ResponseHandler
from paymill_models.mapping.serializer import to_payload

__all__ = [
    "FieldMapper",
    "map_list",
    "map_payload",
    "ItemResponse",
    "ListResponse",
    "ResponseHandler",
    "to_payload",
]
