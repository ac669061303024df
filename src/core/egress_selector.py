"""Egress selection for outbound server connections.

Chooses the dialer used to reach a network context. A context without a
registered dialer is reached by a direct connection.
"""

from enum import Enum
from typing import Any, Callable

# dialer(network, address) -> connection
Dialer = Callable[[str, str], Any]


class NetworkContext(str, Enum):
    """Destinations the server dials out to."""
    CONTROL_PLANE = "controlplane"
    CLUSTER = "cluster"
    ETCD = "etcd"


class EgressSelector:
    """Maps network contexts to dialers."""

    def __init__(self, dialers: dict[NetworkContext, Dialer] | None = None) -> None:
        self._dialers: dict[NetworkContext, Dialer] = dict(dialers or {})

    def lookup(self, context: NetworkContext) -> Dialer | None:
        """Return the dialer for context, or None to dial directly."""
        return self._dialers.get(context)

    def __repr__(self) -> str:
        contexts = sorted(c.value for c in self._dialers)
        return f"EgressSelector(contexts={contexts})"
