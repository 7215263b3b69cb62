"""Registry URL helpers."""

from urllib.parse import urljoin, urlsplit, urlunsplit


def to_nerf_dart(uri: str) -> str:
    """Return the nerf dart for a registry URL.

    The nerf dart is the key npm uses to scope credentials in ``.npmrc``: the
    URL without its scheme, credentials, query and fragment, reduced to the
    containing directory.

    Example:
        >>> to_nerf_dart("https://user:pw@Pkgs.Example.com:8443/org/_packaging/feed/npm/registry?x=1#top")
        '//pkgs.example.com:8443/org/_packaging/feed/npm/'
        >>> to_nerf_dart("https://registry.npmjs.org")
        '//registry.npmjs.org/'
    """
    parts = urlsplit(uri)
    netloc = ""
    if parts.hostname:
        host = parts.hostname
        if ":" in host:
            host = f"[{host}]"
        netloc = f"{host}:{parts.port}" if parts.port is not None else host

    path = parts.path
    if netloc and not path:
        path = "/"

    return urljoin(urlunsplit(("", netloc, path, "", "")), ".")
