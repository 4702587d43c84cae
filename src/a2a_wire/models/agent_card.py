"""Agent card — the self-describing manifest an agent publishes.

Served at ``/.well-known/agent.json``.  Besides identity and skills the card
binds its primary ``url`` to a ``preferred_transport`` and may list further
url/transport pairs in ``additional_interfaces``.  The card SHOULD contain an
interface matching the primary binding; that advice is exposed through
:attr:`AgentCard.has_preferred_interface` but never enforced here.
"""

from __future__ import annotations

from a2a_wire.enums import TransportProtocol
from a2a_wire.models.base import JsonMap, SortedMap, WireModel
from a2a_wire.models.security import SecurityRequirement, SecurityScheme


class AgentProvider(WireModel):
    """The organisation providing the agent."""

    organization: str
    url: str


class AgentExtension(WireModel):
    """A protocol extension the agent supports."""

    uri: str
    description: str | None = None
    required: bool | None = None
    params: JsonMap | None = None


class AgentCapabilities(WireModel):
    """Optional protocol features the agent supports."""

    streaming: bool
    push_notifications: bool
    state_transition_history: bool | None = None
    extensions: list[AgentExtension] | None = None


class AgentInterface(WireModel):
    """A url reachable over a given transport."""

    url: str
    transport: TransportProtocol


class AgentSkill(WireModel):
    """A distinct capability the agent can perform."""

    id: str
    name: str
    description: str
    tags: list[str]
    examples: list[str] | None = None
    input_modes: list[str] | None = None
    output_modes: list[str] | None = None
    security: list[SecurityRequirement] | None = None


class AgentCardSignature(WireModel):
    """A detached JWS (RFC 7515) over the card."""

    protected: str
    signature: str
    header: JsonMap | None = None


class AgentCard(WireModel):
    """Identity, endpoints, security and skills of an agent."""

    protocol_version: str
    name: str
    description: str
    url: str
    preferred_transport: TransportProtocol | None = None
    additional_interfaces: list[AgentInterface] | None = None
    icon_url: str | None = None
    provider: AgentProvider | None = None
    version: str
    documentation_url: str | None = None
    capabilities: AgentCapabilities
    security_schemes: SortedMap[SecurityScheme] | None = None
    security: list[SecurityRequirement] | None = None
    default_input_modes: list[str]
    default_output_modes: list[str]
    skills: list[AgentSkill]
    supports_authenticated_extended_card: bool | None = None
    signatures: list[AgentCardSignature] | None = None

    @property
    def effective_transport(self) -> TransportProtocol:
        """The transport of the primary ``url``, defaulting to JSON-RPC."""
        return self.preferred_transport or TransportProtocol.JSONRPC

    def interface_for(self, transport: TransportProtocol) -> AgentInterface | None:
        """Return the first declared interface using *transport*."""
        for interface in self.additional_interfaces or []:
            if interface.transport is transport:
                return interface
        return None

    @property
    def has_preferred_interface(self) -> bool:
        """Whether an additional interface binds the primary url to its transport."""
        if self.preferred_transport is None:
            return True
        return any(
            interface.url == self.url and interface.transport is self.preferred_transport
            for interface in self.additional_interfaces or []
        )
