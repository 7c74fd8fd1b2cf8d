"""
URL part names, the part map, and path / query / fragment value types.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode

from urlparts.exceptions import UnknownPartError

# Alternate spellings accepted by Part.coerce
PART_ALIASES = {
    "pass": "password",
    "registerable_domain": "registrable_domain",
}


class Part(str, Enum):
    """Names of the fields of a URL."""

    SCHEME = "scheme"
    HOST = "host"
    PORT = "port"
    USER = "user"
    PASSWORD = "password"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"
    PUBLIC_SUFFIX = "public_suffix"
    REGISTRABLE_DOMAIN = "registrable_domain"
    SUBDOMAIN = "subdomain"
    CANONICAL = "canonical"
    RESOURCE = "resource"

    @property
    def is_derived(self) -> bool:
        return self in DERIVED_PARTS

    @classmethod
    def coerce(cls, name: Any) -> "Part":
        """
        Resolve a part name.

        Raises:
            UnknownPartError: If ``name`` is not a known part
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(PART_ALIASES.get(name, name))
        except (ValueError, TypeError):
            raise UnknownPartError(name) from None


DERIVED_PARTS = frozenset(
    {
        Part.PUBLIC_SUFFIX,
        Part.REGISTRABLE_DOMAIN,
        Part.SUBDOMAIN,
        Part.CANONICAL,
        Part.RESOURCE,
    }
)


class StringPart:
    """Base for value types that render to a URL component string."""

    def __str__(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (StringPart, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __bool__(self) -> bool:
        return bool(str(self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


class Path(StringPart):
    """
    URL path as a list of segments.

    "/one/two/" has segments ["one", "two", ""]; the empty last segment
    keeps the trailing slash.
    """

    def __init__(self, path: Optional[str] = None):
        path = path or ""
        self.absolute = path.startswith("/")
        body = path[1:] if self.absolute else path
        self.segments: list[str] = body.split("/") if body else []

    def add(self, segment: str) -> "Path":
        """Append a segment, filling a trailing-slash slot if present."""
        if self.segments and self.segments[-1] == "":
            self.segments[-1] = segment
        else:
            self.segments.append(segment)
        return self

    def __str__(self) -> str:
        prefix = "/" if self.absolute else ""
        return prefix + "/".join(self.segments)


class Query(StringPart):
    """
    URL query string as ordered (key, value) pairs.

    str() re-encodes the whole query with urlencode, so untouched parameters
    may change spelling: "flag&a=b%20c" renders as "flag=&a=b+c".
    """

    def __init__(self, query: Optional[str] = None):
        self.params: list[tuple[str, str]] = parse_qsl(
            query or "", keep_blank_values=True
        )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """First value for ``key``."""
        for name, value in self.params:
            if name == key:
                return value
        return default

    def get_all(self, key: str) -> list[str]:
        return [value for name, value in self.params if name == key]

    def has(self, key: str) -> bool:
        return any(name == key for name, _ in self.params)

    def set(self, key: str, value: Any) -> "Query":
        """Replace every value of ``key`` with ``value``, keeping its position."""
        value = str(value)
        params = []
        replaced = False
        for name, current in self.params:
            if name != key:
                params.append((name, current))
            elif not replaced:
                params.append((name, value))
                replaced = True
        if not replaced:
            params.append((key, value))
        self.params = params
        return self

    def remove(self, key: str) -> "Query":
        self.params = [(name, value) for name, value in self.params if name != key]
        return self

    def to_dict(self) -> dict[str, str]:
        """Mapping of keys to their last value."""
        return dict(self.params)

    def __len__(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return urlencode(self.params)


class Fragment(StringPart):
    """URL fragment, split into a path and an optional query at the first "?"."""

    def __init__(self, fragment: Optional[str] = None):
        path, sep, query = (fragment or "").partition("?")
        self.path = Path(path)
        self.query: Optional[Query] = Query(query) if sep else None

    def __str__(self) -> str:
        rendered = str(self.path)
        if self.query is not None:
            rendered += f"?{self.query}"
        return rendered


def normalize_part_value(part: Part, value: Any) -> Any:
    """
    Coerce a value into the form stored for ``part``.

    Value objects become strings, empty strings become None, ports become
    int and scheme / host are lower-cased.

    Raises:
        ValueError: If a port is not an integer in 0-65535
    """
    if value is None:
        return None

    if part is Part.PORT:
        if value == "":
            return None
        port = int(value)
        if not 0 <= port <= 65535:
            raise ValueError(f"Port out of range 0-65535: {port}")
        return port

    value = str(value)
    if not value:
        return None
    if part in (Part.SCHEME, Part.HOST):
        value = value.lower()
    return value


@dataclass
class UrlParts:
    """
    All parts of a URL, raw and derived.

    Every field is None when absent.
    """

    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None
    public_suffix: Optional[str] = None
    registrable_domain: Optional[str] = None
    subdomain: Optional[str] = None
    canonical: Optional[str] = None
    resource: Optional[str] = None

    def get(self, part: Part) -> Any:
        return getattr(self, part.value)

    def set(self, part: Part, value: Any) -> None:
        setattr(self, part.value, value)

    def clear(self) -> None:
        for field in fields(self):
            setattr(self, field.name, None)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
