"""Network facts about the local host."""

import ipaddress
import socket

import psutil

LOOPBACK_IPV4 = "127.0.0.1"


def get_local_ipv4() -> str:
    """Return the first non-loopback IPv4 address of any local interface.

    Interfaces are visited in the order psutil reports them. Falls back to
    ``127.0.0.1`` when the host has no external IPv4 address.

    Examples:
        >>> get_local_ipv4()  # doctest: +SKIP
        '10.0.0.12'
    """
    for addresses in psutil.net_if_addrs().values():
        for address in addresses:
            if address.family != socket.AF_INET:
                continue
            try:
                if ipaddress.IPv4Address(address.address).is_loopback:
                    continue
            except ipaddress.AddressValueError:
                continue
            return address.address

    return LOOPBACK_IPV4
