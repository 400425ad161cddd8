"""Citation numbering with per-destination deduplication"""

from dataclasses import dataclass
from typing import Iterator
from urllib.parse import quote, urlsplit

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

# Schemes whose empty path normalizes to "/"
HIERARCHICAL_SCHEMES = {"http", "https", "ws", "wss", "ftp", "file"}

# Printable ASCII left alone in paths; space, quotes, <, >, `, {, } are escaped
PATH_SAFE = "/%:@!$&'()*+,;=[]|^\\"


def remove_dot_segments(path: str) -> str:
    """Resolve "." and ".." segments of an absolute path"""
    segments = path.split("/")[1:]
    output: list[str] = []
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "..":
            if output:
                output.pop()
            if last:
                output.append("")
        elif segment == ".":
            if last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def normalize_host(hostname: str) -> str:
    host = hostname.lower()
    if ":" in host:
        return f"[{host}]"
    if not host.isascii():
        try:
            return host.encode("idna").decode("ascii")
        except UnicodeError:
            return host
    return host


def link_key(url: str) -> str:
    """Return scheme://host/path for a URL, dropping query and fragment.

    Host names are lower-cased and IDNA-encoded, dot segments are resolved
    and unsafe path characters percent-encoded. Relative or unparseable URLs
    are returned unchanged.
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return url

    if not parts.scheme:
        return url

    host = normalize_host(parts.hostname or "")
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"

    path = parts.path
    if parts.scheme in HIERARCHICAL_SCHEMES:
        if not path:
            path = "/"
        elif path.startswith("/"):
            path = remove_dot_segments(path)
        path = quote(path, safe=PATH_SAFE)

    if parts.netloc or parts.scheme in HIERARCHICAL_SCHEMES:
        return f"{parts.scheme}://{host}{path}"
    return f"{parts.scheme}:{path}"


@dataclass(frozen=True)
class Citation:
    """A numbered source"""

    number: int
    key: str
    url: str  # First href seen for this key


class CitationRegistry:
    """Assign citation numbers to link destinations in first-seen order"""

    def __init__(self):
        self._citations: dict[str, Citation] = {}

    def resolve(self, url: str) -> int:
        """Return the citation number for a URL, registering it if new"""
        key = link_key(url)
        citation = self._citations.get(key)
        if citation is None:
            citation = Citation(number=len(self._citations) + 1, key=key, url=url)
            self._citations[key] = citation
        return citation.number

    def get(self, url: str) -> int | None:
        """Look up a URL's number without registering it"""
        citation = self._citations.get(link_key(url))
        return citation.number if citation else None

    def citations(self) -> list[Citation]:
        return list(self._citations.values())

    def __iter__(self) -> Iterator[Citation]:
        return iter(self._citations.values())

    def __len__(self) -> int:
        return len(self._citations)
