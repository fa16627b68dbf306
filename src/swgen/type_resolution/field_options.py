"""Per-field configuration of dataclass attributes exposed through the API contract."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from swgen.schema_model.common_types import CommonName

FIELD_OPTIONS_KEY = "swgen"
OMIT = "-"


@dataclass(frozen=True)
class FieldOptions:  # pylint: disable=too-many-instance-attributes
    """How a dataclass field appears in definitions and parameters.

    ``name`` renames the definition property (``"-"`` hides it), ``param``
    exposes the field as a query or header parameter and ``path`` as a path
    parameter. Fields with neither ``param`` nor ``path`` are not parameters.
    """

    name: str | None = None
    param: str | None = None
    path: str | None = None
    location: str | None = None
    required: bool = True
    description: str = ""
    default: Any = None
    swagger_type: CommonName | str | None = None
    embed: bool = False

    @property
    def omitted(self) -> bool:
        return self.name == OMIT

    def property_name(self, attribute: str) -> str:
        return self.name or attribute

    def parameter_name(self) -> tuple[str, bool] | None:
        """Return the parameter name and whether it was bound through ``path``."""
        if self.param and self.param != OMIT:
            return self.param, False
        if self.path and self.path != OMIT:
            return self.path, True
        return None


_DEFAULT_OPTIONS = FieldOptions()


def api_field(  # pylint: disable=too-many-arguments
    *,
    name: str | None = None,
    param: str | None = None,
    path: str | None = None,
    location: str | None = None,
    required: bool = True,
    description: str = "",
    default: Any = None,
    swagger_type: CommonName | str | None = None,
    embed: bool = False,
    value: Any = dataclasses.MISSING,
    value_factory: Any = dataclasses.MISSING,
) -> Any:
    """Declare a dataclass field together with its API options.

    ``default`` is the documented default value; ``value`` and
    ``value_factory`` are the dataclass defaults of the attribute itself.
    """
    options = FieldOptions(
        name=name,
        param=param,
        path=path,
        location=location,
        required=required,
        description=description,
        default=default,
        swagger_type=swagger_type,
        embed=embed,
    )
    return dataclasses.field(
        default=value,
        default_factory=value_factory,
        metadata={FIELD_OPTIONS_KEY: options},
    )


def field_options(field: dataclasses.Field[Any]) -> FieldOptions:
    options = field.metadata.get(FIELD_OPTIONS_KEY)
    if isinstance(options, FieldOptions):
        return options
    return _DEFAULT_OPTIONS


def is_visible(field: dataclasses.Field[Any]) -> bool:
    """Private attributes are not part of the API contract."""
    return not field.name.startswith("_")
