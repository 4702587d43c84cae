"""Untagged unions — variant selection by field presence.

An untagged union has no discriminator on the wire.  The variant is chosen by
trying each alternative in a fixed, declared order and taking the first whose
required keys are all present in the object.  The order is part of the
protocol: ``{"bytes": ..., "uri": ...}`` is a bytes file, not an error.

Selection is exposed as a pydantic callable :class:`~pydantic.Discriminator`
so that nested fields and top-level decoding share the same rule.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from pydantic import BaseModel, Discriminator


class Variant(NamedTuple):
    """One alternative of an untagged union."""

    tag: str
    model: type[BaseModel]
    required: frozenset[str]


class UntaggedUnion:
    """Ordered trial of variants keyed on which fields are present."""

    def __init__(self, name: str, *variants: Variant) -> None:
        self.name = name
        self.variants = variants

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(v.tag for v in self.variants)

    def select(self, value: Any) -> str | None:
        """Return the tag of the first matching variant, or ``None``."""
        if isinstance(value, BaseModel):
            for variant in self.variants:
                if isinstance(value, variant.model):
                    return variant.tag
            return None
        if isinstance(value, Mapping):
            for variant in self.variants:
                if variant.required <= value.keys():
                    return variant.tag
        return None

    def discriminator(self) -> Discriminator:
        """A pydantic discriminator applying :meth:`select`."""
        return Discriminator(
            self.select,
            custom_error_type="no_matching_variant",
            custom_error_message=f"No {self.name} variant matched the present fields",
            custom_error_context={"union": self.name, "variants": ", ".join(self.tags)},
        )
