"""Field descriptors - the explicit list of fields an item type reflects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .errors import DeveloperError


# Internal-prefix marker; attributes starting with it are never reflected.
PRIVATE_PREFIX = "_"

# Reserved for the discriminator written by the exporter.
RESERVED_NAMES = frozenset({"type"})

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel_case(snake_str: str) -> str:
    """Convert a snake_case string to camelCase."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_snake_case(camel_str: str) -> str:
    """Convert a camelCase string to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", camel_str).lower()


@dataclass(frozen=True, slots=True)
class ItemField:
    """
    One reflected field of a catalog item.

    ``name`` is the key used in JSON documents; ``attribute`` is the Python
    attribute it maps to. When ``attribute`` is omitted it is derived from
    ``name`` (``isEnabled`` -> ``is_enabled``).
    """
    name: str
    attribute: str = ""

    def __post_init__(self):
        if not self.attribute:
            object.__setattr__(self, "attribute", to_snake_case(self.name))
        for value in (self.name, self.attribute):
            if not value or value.startswith(PRIVATE_PREFIX):
                raise DeveloperError(
                    f"Invalid item field {value!r}: names must be non-empty "
                    f"and must not start with {PRIVATE_PREFIX!r}"
                )
        if self.name in RESERVED_NAMES:
            raise DeveloperError(f"Item field name {self.name!r} is reserved")

    def get(self, item: Any) -> Any:
        return getattr(item, self.attribute)

    def set(self, item: Any, value: Any) -> None:
        setattr(item, self.attribute, value)


def as_field(declaration: ItemField | str) -> ItemField:
    """Coerce a field declaration (descriptor or bare JSON key) to an ``ItemField``."""
    if isinstance(declaration, ItemField):
        return declaration
    if isinstance(declaration, str):
        return ItemField(declaration)
    raise DeveloperError(f"Field declarations must be ItemField or str, got {declaration!r}")


def merge_fields(
    inherited: tuple[ItemField, ...],
    declared: tuple[ItemField | str, ...],
    owner: str,
) -> tuple[ItemField, ...]:
    """
    Append ``declared`` to ``inherited``, rejecting duplicate JSON keys.

    ``owner`` names the class being built, for error messages.
    """
    result = list(inherited)
    seen = {f.name for f in inherited}
    for declaration in declared:
        item_field = as_field(declaration)
        if item_field.name in seen:
            raise DeveloperError(
                f"{owner} declares field {item_field.name!r} which is already defined"
            )
        seen.add(item_field.name)
        result.append(item_field)
    return tuple(result)
