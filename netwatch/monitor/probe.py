"""Connectivity probe based on local interface state."""

import ipaddress
import logging
import socket
from typing import Iterable, Optional

import psutil

logger = logging.getLogger(__name__)

# Only IP addresses count as "assigned"; link-layer entries are ignored
_IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _is_loopback_address(address: str) -> bool:
    # IPv6 link-local addresses may carry a zone suffix ("fe80::1%eth0")
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


def _is_loopback(stats, addresses) -> bool:
    flags = getattr(stats, "flags", None)
    if flags:
        return "loopback" in flags.split(",")
    return any(_is_loopback_address(addr.address) for addr in addresses)


def is_online(ignore_interfaces: Optional[Iterable[str]] = None) -> bool:
    """Check whether any non-loopback interface is up with an IP address.

    Enumeration failures are reported as offline.

    Args:
        ignore_interfaces: Interface names to leave out of the check.

    Returns:
        True if at least one usable interface was found.
    """
    ignored = set(ignore_interfaces or ())

    try:
        stats = psutil.net_if_stats()
        addrs = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        logger.warning(f"Could not enumerate network interfaces: {e}")
        return False

    for name, iface in stats.items():
        if name in ignored or not iface.isup:
            continue

        ip_addresses = [a for a in addrs.get(name, []) if a.family in _IP_FAMILIES]
        if not ip_addresses or _is_loopback(iface, ip_addresses):
            continue

        logger.debug(f"Interface {name} is up with {len(ip_addresses)} address(es)")
        return True

    return False
