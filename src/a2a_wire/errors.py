"""Error types raised by the wire layer.

Protocol-level errors (``ErrorKind``) are *data* and live in
:mod:`a2a_wire.registry`; the classes here cover local failures only:
payloads whose shape cannot be decoded, and input files that cannot be read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

logger = logging.getLogger(__name__)

Loc = tuple[str | int, ...]


class WireError(Exception):
    """Base error for all wire-layer failures."""


class PayloadLoadError(WireError):
    """An input payload file could not be read or parsed."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot load payload {path}" + (f": {detail}" if detail else ""))


class DecodeError(WireError):
    """A payload does not have the shape of the requested wire type."""

    def __init__(self, detail: str, loc: Loc = ()) -> None:
        self.detail = detail
        self.loc = tuple(loc)
        where = f" at {self.field}" if self.loc else ""
        super().__init__(f"Decode failed{where}: {detail}")

    @property
    def field(self) -> str:
        """Dotted path of the failing field (empty for the top-level object)."""
        return ".".join(str(part) for part in self.loc)


class UnknownDiscriminatorError(DecodeError):
    """A tagged union carried a discriminator value naming no known variant."""

    def __init__(
        self,
        tag_field: str,
        value: Any,
        expected: Sequence[str] = (),
        loc: Loc = (),
    ) -> None:
        self.tag_field = tag_field
        self.value = value
        self.expected = tuple(expected)
        detail = f"unknown {tag_field!r} value {value!r}"
        if self.expected:
            detail += f" (expected one of: {', '.join(self.expected)})"
        super().__init__(detail, loc)


class NoMatchingVariantError(DecodeError):
    """No variant of an untagged union found its required fields."""

    def __init__(self, union: str, variants: Sequence[str] = (), loc: Loc = ()) -> None:
        self.union = union
        self.variants = tuple(variants)
        detail = f"no {union} variant matched"
        if self.variants:
            detail += f" (tried: {', '.join(self.variants)})"
        super().__init__(detail, loc)


class MissingFieldError(DecodeError):
    """A required field was absent."""


class MalformedValueError(DecodeError):
    """A field was present but held a value of the wrong type or form."""


# Most specific first: the variant could not be chosen at all, then a hole in
# the chosen variant, then anything else.
_PRIORITY = {
    "union_tag_invalid": 0,
    "no_matching_variant": 0,
    "union_tag_not_found": 1,
    "missing": 2,
}


def _unquote(value: Any) -> str:
    return str(value).strip("'\"")


def _split_tags(raw: Any) -> list[str]:
    return [_unquote(tag.strip()) for tag in str(raw).split(",") if tag.strip()]


def from_validation_error(exc: ValidationError) -> DecodeError:
    """Translate a pydantic :class:`ValidationError` into a :class:`DecodeError`.

    Only the most specific failure is reported; the pydantic exception should
    be chained by the caller.
    """
    errors = exc.errors(include_url=False)
    if not errors:
        return MalformedValueError(str(exc))

    err = min(errors, key=lambda e: _PRIORITY.get(e["type"], 3))
    kind = err["type"]
    loc: Loc = tuple(err.get("loc", ()))
    ctx: dict[str, Any] = dict(err.get("ctx") or {})
    logger.debug("decode failed (%s) at %s: %s", kind, loc, err["msg"])

    if kind == "union_tag_invalid":
        return UnknownDiscriminatorError(
            _unquote(ctx.get("discriminator", "")),
            ctx.get("tag"),
            _split_tags(ctx.get("expected_tags", "")),
            loc,
        )
    if kind == "no_matching_variant":
        return NoMatchingVariantError(
            str(ctx.get("union", "union")),
            _split_tags(ctx.get("variants", "")),
            loc,
        )
    if kind == "union_tag_not_found":
        tag_field = _unquote(ctx.get("discriminator", ""))
        return MissingFieldError(f"missing discriminator {tag_field!r}", (*loc, tag_field))
    if kind == "missing":
        return MissingFieldError("field required", loc)
    return MalformedValueError(err["msg"], loc)
