"""Security schemes — the ``type``-tagged union advertised on an agent card.

Follows the OpenAPI 3.0 Security Scheme Object.  Each variant carries its own
fields; specification extensions (keys prefixed ``x-``) are captured into a
separate ``extensions`` map on decode and merged back, sorted, on encode.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import Discriminator, Field, SerializationInfo, model_validator

from a2a_wire.models.base import JsonMap, SortedMap, WireModel

EXTENSION_PREFIX = "x-"

SecurityRequirement = SortedMap[list[str]]
"""Scheme name -> required scopes.  A list of these is an OR of ANDs."""


def _is_extension(key: Any) -> bool:
    return isinstance(key, str) and key.startswith(EXTENSION_PREFIX)


# ---------------------------------------------------------------------------
# OAuth2 flows
# ---------------------------------------------------------------------------


class OAuthFlow(WireModel):
    """A single OAuth2 flow."""

    authorization_url: str | None = None
    token_url: str | None = None
    refresh_url: str | None = None
    scopes: SortedMap[str] | None = None


class OAuthFlows(WireModel):
    """The OAuth2 flows a scheme supports."""

    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = None
    authorization_code: OAuthFlow | None = None
    device_code: OAuthFlow | None = None


# ---------------------------------------------------------------------------
# Scheme variants
# ---------------------------------------------------------------------------


class _SchemeBase(WireModel):
    description: str | None = None
    extensions: JsonMap = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _capture_extensions(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        # Only x- keys become extensions, whether top-level or under "extensions".
        given = data.get("extensions")
        nested = given.items() if isinstance(given, Mapping) else ()
        captured = {key: value for key, value in nested if _is_extension(key)}
        remaining: dict[str, Any] = {}
        for key, value in data.items():
            if _is_extension(key):
                captured[key] = value
            elif key != "extensions":
                remaining[key] = value
        remaining["extensions"] = captured
        return remaining

    def _finish_wire(self, data: dict[str, Any], info: SerializationInfo) -> dict[str, Any]:
        for key in sorted(self.extensions):
            data.setdefault(key, self.extensions[key])
        return data


class APIKeySecurityScheme(_SchemeBase):
    """An API key carried in a header, query parameter or cookie."""

    type: Literal["apiKey"] = "apiKey"
    name: str
    location: str = Field(alias="in")


class HTTPAuthSecurityScheme(_SchemeBase):
    """HTTP authentication (RFC 7235), e.g. ``basic`` or ``bearer``."""

    type: Literal["http"] = "http"
    scheme: str
    bearer_format: str | None = None


class MutualTLSSecurityScheme(_SchemeBase):
    """Mutual TLS client authentication."""

    type: Literal["mutualTLS"] = "mutualTLS"


class OAuth2SecurityScheme(_SchemeBase):
    """OAuth 2.0 with one or more flows."""

    type: Literal["oauth2"] = "oauth2"
    flows: OAuthFlows
    oauth2_metadata_url: str | None = None


class OpenIdConnectSecurityScheme(_SchemeBase):
    """OpenID Connect discovery."""

    type: Literal["openIdConnect"] = "openIdConnect"
    open_id_connect_url: str


SecurityScheme = Annotated[
    APIKeySecurityScheme
    | HTTPAuthSecurityScheme
    | MutualTLSSecurityScheme
    | OAuth2SecurityScheme
    | OpenIdConnectSecurityScheme,
    Discriminator("type"),
]
