"""Registrable domain extraction and third-party checks."""

from typing import Optional
from urllib.parse import urlparse

import tldextract

# Bundled public suffix snapshot only, never fetched over the network
_extract = tldextract.TLDExtract(suffix_list_urls=())


def get_hostname(url: Optional[str]) -> Optional[str]:
    """Return the lowercased hostname of a URL, or None if it has none."""
    if not url:
        return None
    try:
        return urlparse(url).hostname or None
    except ValueError:
        return None


def registrable_domain(url: Optional[str]) -> Optional[str]:
    """Return the public-suffix-aware registrable domain of a URL.

    ``https://sub.example.co.uk/x`` gives ``example.co.uk``. Hosts without a
    public suffix (``localhost``, IP addresses) are their own registrable
    domain. URLs without a host give None.
    """
    hostname = get_hostname(url)
    if hostname is None:
        return None

    ext = _extract(hostname)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return hostname


def is_third_party(url: Optional[str], source_url: Optional[str]) -> bool:
    """Check if a request URL is third-party to the page that loaded it.

    An unknown or unparseable source is always third-party.
    """
    source_domain = registrable_domain(source_url)
    if source_domain is None:
        return True
    return registrable_domain(url) != source_domain
