import ipaddress
from typing import Mapping, Optional

OVERRIDE_PARAMS = ("site", "website")
RESERVED_SUBDOMAINS = frozenset({"www", "admin"})


def _strip_port(host: str) -> str:
    if host.startswith("["):  # [::1]:5000
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        return host.rsplit(":", 1)[0]
    return host


def _is_ip_address(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


def identify_tenant(host: Optional[str], query_params: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Extract the candidate website key for a request.

    An explicit ``site``/``website`` parameter wins over the host, which lets
    staging and local development address any website without DNS. Otherwise
    the first label of ``sub.domain.tld`` is used, except on localhost, IP
    addresses, bare domains and the reserved ``www``/``admin`` labels.
    """
    params = query_params or {}
    for name in OVERRIDE_PARAMS:
        value = params.get(name)
        if value:
            return value

    if not host:
        return None

    hostname = _strip_port(host.strip()).lower().rstrip(".")
    if hostname == "localhost" or _is_ip_address(hostname):
        return None

    labels = hostname.split(".")
    if len(labels) < 3:
        return None

    subdomain = labels[0]
    if not subdomain or subdomain in RESERVED_SUBDOMAINS:
        return None

    return subdomain
