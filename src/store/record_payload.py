"""Shared payload serialization for NftRecord values.

This module maps records to and from the camelCase dataset shape.
It is reused by the dataset reader and the dataset writer.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.types import NftAttribute, NftRecord

_RECORD_FIELDS = ("id", "imageId", "rarity", "attributes", "percentage")
_ATTRIBUTE_FIELDS = ("type", "value", "rarity")


def nft_record_to_payload(record: NftRecord) -> dict[str, object]:
    """Serialize NftRecord into a JSON-safe payload.

    Args:
        record: Dataset record.

    Returns:
        Dictionary payload in declared field order.
    """
    return {
        "id": record.record_id,
        "imageId": record.image_id,
        "rarity": record.rarity,
        "attributes": [
            {
                "type": attribute.attribute_type,
                "value": attribute.value,
                "rarity": attribute.rarity,
            }
            for attribute in record.attributes
        ],
        "percentage": record.percentage,
    }


def nft_record_from_payload(payload: object) -> NftRecord:
    """Deserialize a payload into NftRecord.

    Args:
        payload: Parsed record object.

    Returns:
        Parsed record.

    Raises:
        ValueError: If the payload does not match the record shape.
    """
    mapping = _expect_mapping(payload, "record", _RECORD_FIELDS)
    attributes_value = mapping["attributes"]
    if not isinstance(attributes_value, list):
        raise ValueError("field 'attributes' must be a list")
    attributes = tuple(
        _attribute_from_payload(item, index) for index, item in enumerate(attributes_value)
    )
    return NftRecord(
        record_id=_expect_integer(mapping["id"], "id"),
        image_id=_expect_string(mapping["imageId"], "imageId"),
        rarity=_expect_number(mapping["rarity"], "rarity"),
        attributes=attributes,
        percentage=_expect_number(mapping["percentage"], "percentage"),
    )


def _attribute_from_payload(payload: object, index: int) -> NftAttribute:
    mapping = _expect_mapping(payload, f"attributes[{index}]", _ATTRIBUTE_FIELDS)
    return NftAttribute(
        attribute_type=_expect_string(mapping["type"], f"attributes[{index}].type"),
        value=_expect_string(mapping["value"], f"attributes[{index}].value"),
        rarity=_expect_number(mapping["rarity"], f"attributes[{index}].rarity"),
    )


def _expect_mapping(
    value: object,
    context: str,
    required_fields: tuple[str, ...],
) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{context} must be an object")
    missing_fields = [name for name in required_fields if name not in value]
    if missing_fields:
        raise ValueError(f"{context} is missing fields {missing_fields}")
    return value


def _expect_string(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field '{field_name}' must be a string")
    return value


def _expect_integer(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{field_name}' must be an integer")
    return value


def _expect_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field '{field_name}' must be a number")
    return value
