"""Catalog exceptions.

Two families are kept deliberately apart:

- ``DeveloperError`` signals a defect in calling code or in a subtype
  (missing context, unimplemented ``type``, bad field declaration). It is
  never raised for bad input data and the library never catches it.
- ``CatalogError`` signals a problem with a catalog document that a caller
  may reasonably report and recover from.
"""

from __future__ import annotations


class DeveloperError(Exception):
    """A programming error: the caller or a subtype broke a contract."""


class CatalogError(Exception):
    """A catalog document could not be applied."""


class UnknownItemTypeError(CatalogError):
    """No item class is registered for a ``type`` tag."""

    def __init__(self, item_type: str):
        self.item_type = item_type
        super().__init__(f"Unknown catalog item type: {item_type!r}")
