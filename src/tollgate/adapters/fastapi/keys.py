"""FastAPI adapter – key resolvers over the ASGI scope.

Resolved keys never carry raw identity: IPs and API keys are hashed.

The default key is the socket peer. ``X-Forwarded-For`` is written by
whoever sent the request, so it only identifies the client when the peer
is a proxy you operate; :func:`forwarded_ip_key` honours it behind such
proxies and nowhere else.
"""
from __future__ import annotations

import ipaddress
from typing import TYPE_CHECKING, Any, Callable, Iterable

from tollgate.application.rate_limit.keys import hashed_key

if TYPE_CHECKING:
    from starlette.types import Scope


def _header(scope: Any, name: str) -> str:
    wanted = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1").strip()
    return ""


def _peer(scope: Any) -> str:
    client = scope.get("client")
    if client and isinstance(client, (tuple, list)):
        return str(client[0])
    return "unknown"


def _ip_key(ip: str) -> str:
    return f"ip:{hashed_key(ip)}"


def client_ip_key(scope: "Scope") -> str:
    """Key by the socket peer address, ignoring forwarding headers."""
    return _ip_key(_peer(scope))


class _TrustedProxies:
    """Membership test over IPs, CIDR blocks and literal peer names."""

    def __init__(self, entries: Iterable[str]) -> None:
        self._networks: list[ipaddress.IPv4Network | ipaddress.IPv6Network] = []
        self._names: set[str] = set()
        for entry in entries:
            try:
                self._networks.append(ipaddress.ip_network(entry.strip(), strict=False))
            except ValueError:
                self._names.add(entry.strip())

    def __contains__(self, address: str) -> bool:
        if address in self._names:
            return True
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            return False
        return any(ip in network for network in self._networks)


def forwarded_ip_key(trusted_proxies: Iterable[str]) -> Callable[["Scope"], str]:
    """Key by the client address reported through trusted proxies.

    When the socket peer is in *trusted_proxies* (IPs, CIDR blocks such as
    ``"10.0.0.0/8"``, or peer names), ``X-Forwarded-For`` is read from the
    right and trusted hops are skipped; the first untrusted hop is the
    client. Requests from any other peer are keyed by the peer itself.
    """
    trusted = _TrustedProxies(trusted_proxies)

    def resolve(scope: "Scope") -> str:
        peer = _peer(scope)
        if peer not in trusted:
            return _ip_key(peer)
        hops = [hop.strip() for hop in _header(scope, "x-forwarded-for").split(",") if hop.strip()]
        for hop in reversed(hops):
            if hop not in trusted:
                return _ip_key(hop)
        return _ip_key(hops[0] if hops else peer)

    return resolve


def api_key_key(
    header: str = "authorization",
    scheme: str | None = "Bearer",
    fallback: Callable[["Scope"], str] = client_ip_key,
) -> Callable[["Scope"], str]:
    """Key by an API key header, falling back to *fallback* (the peer IP).

    With *scheme* set, only ``<scheme> <token>`` values count.
    """

    def resolve(scope: "Scope") -> str:
        value = _header(scope, header)
        if scheme is not None:
            prefix = f"{scheme} "
            value = value[len(prefix):].strip() if value.startswith(prefix) else ""
        if value:
            return f"apikey:{hashed_key(value)}"
        return fallback(scope)

    return resolve


__all__ = ["api_key_key", "client_ip_key", "forwarded_ip_key"]
