"""Common data types of the Swagger 2.0 specification."""

from __future__ import annotations

from enum import Enum


class CommonName(str, Enum):
    """Symbolic names of well-known primitive schemas."""

    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    BYTE = "byte"
    BINARY = "binary"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_TIME = "dateTime"
    PASSWORD = "password"


# https://github.com/OAI/OpenAPI-Specification/blob/master/versions/2.0.md#data-types
COMMON_TYPES: dict[str, tuple[str, str]] = {
    CommonName.INTEGER.value: ("integer", "int32"),
    CommonName.LONG.value: ("integer", "int64"),
    CommonName.FLOAT.value: ("number", "float"),
    CommonName.DOUBLE.value: ("number", "double"),
    CommonName.STRING.value: ("string", ""),
    CommonName.BYTE.value: ("string", "byte"),
    CommonName.BINARY.value: ("string", "binary"),
    CommonName.BOOLEAN.value: ("boolean", ""),
    CommonName.DATE.value: ("string", "date"),
    CommonName.DATE_TIME.value: ("string", "date-time"),
    CommonName.PASSWORD.value: ("string", "password"),
}


def common_name_value(name: CommonName | str) -> str:
    return name.value if isinstance(name, CommonName) else str(name)


def is_common_name(name: CommonName | str) -> bool:
    """Return True when the name is listed in the common-type table."""
    return common_name_value(name) in COMMON_TYPES
