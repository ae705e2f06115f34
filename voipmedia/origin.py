"""SDP session origin (o= line)."""

from __future__ import annotations

import ipaddress
import secrets
from dataclasses import dataclass

FALLBACK_ADDR = "69.28.157.198"


def generate_origin_id() -> str:
    """Return a random decimal identifier suitable for an o= line."""
    return str(secrets.randbits(63))


def is_ipv6(addr: str) -> bool:
    """Return True if ``addr`` is a literal IPv6 address."""
    try:
        return ipaddress.ip_address(addr).version == 6
    except ValueError:
        return False


@dataclass
class Origin:
    """The o= line: user, session id, version and originating address."""

    user: str = ""
    id: str = ""
    version: str = ""
    addr: str = ""

    def format(self) -> str:
        """Render the o= line, filling in blank fields with defaults."""
        origin_id = self.id or generate_origin_id()
        user = self.user or "-"
        version = self.version or origin_id
        net = "IP6" if is_ipv6(self.addr) else "IP4"
        addr = self.addr or FALLBACK_ADDR
        return f"o={user} {origin_id} {version} IN {net} {addr}\r\n"