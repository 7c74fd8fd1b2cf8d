"""
Url: a lazily parsed, mutable URL.

A Url built from a string does no work until a part is read or written;
the first access parses the string (materialization). Parts can then be
changed with set() or merged from another URL with join(), and the Url
renders back to a string with str().

Derived parts (public_suffix, registrable_domain, subdomain, canonical,
resource) are computed by a parse. Changing host, path or query through
set() or join() leaves them as they were until refresh() is called.

The Path, Query and Fragment objects handed out by get_path(), get_query()
and get_fragment() belong to the Url: edits made to them show up in the
matching part and in str(url).
"""

from typing import Any, Mapping, Optional, Union

from .parser import Parser, get_default_parser
from .parts import Fragment, Part, Path, Query, StringPart, UrlParts, normalize_part_value


def _part_property(part: Part, writable: bool = True) -> property:
    def fget(self: "Url") -> Any:
        return self.get(part)

    def fset(self: "Url", value: Any) -> None:
        self.set(part, value)

    return property(fget, fset if writable else None, doc=f"The {part.value} part.")


class Url:
    """
    Mutable URL with lazy parsing.

    Usage:
        url = Url("https://sub.domain.jwage.com:443/about?param=value")
        url.registrable_domain  # "jwage.com" (parses on first access)
        url.set("path", "/contact").join("http://example.org")
        str(url)                # "http://example.org:443/contact?param=value"
    """

    scheme = _part_property(Part.SCHEME)
    host = _part_property(Part.HOST)
    port = _part_property(Part.PORT)
    user = _part_property(Part.USER)
    password = _part_property(Part.PASSWORD)
    path = _part_property(Part.PATH)
    query = _part_property(Part.QUERY)
    fragment = _part_property(Part.FRAGMENT)
    public_suffix = _part_property(Part.PUBLIC_SUFFIX, writable=False)
    registrable_domain = _part_property(Part.REGISTRABLE_DOMAIN, writable=False)
    subdomain = _part_property(Part.SUBDOMAIN, writable=False)
    canonical = _part_property(Part.CANONICAL, writable=False)
    resource = _part_property(Part.RESOURCE, writable=False)

    def __init__(self, raw: Any = None, parser: Optional[Parser] = None):
        """
        Create a Url. Nothing is parsed until a part is accessed.

        Args:
            raw: URL string (other objects are converted with str())
            parser: Parser to use (defaults to the process-wide parser)
        """
        self._raw: Optional[str] = None if raw is None else str(raw)
        self._parser = parser
        self._parts = UrlParts()
        self._materialized = False
        # part -> (string form when last synced, owned value object)
        self._objects: dict[Part, tuple[str, StringPart]] = {}

    @classmethod
    def from_parts(
        cls, parts: Mapping[Union[str, Part], Any], parser: Optional[Parser] = None
    ) -> "Url":
        """
        Build an already materialized Url from explicit parts.

        Derived parts are only set if given; call refresh() to compute them.
        """
        url = cls(None, parser)
        url._materialized = True
        for name, value in parts.items():
            part = Part.coerce(name)
            url._parts.set(part, normalize_part_value(part, value))
        return url

    @property
    def parser(self) -> Parser:
        if self._parser is None:
            self._parser = get_default_parser()
        return self._parser

    @parser.setter
    def parser(self, parser: Parser) -> None:
        self._parser = parser

    @property
    def raw(self) -> Optional[str]:
        """The source string, None for Urls built from parts."""
        return self._raw

    @property
    def materialized(self) -> bool:
        return self._materialized

    def _current(self) -> UrlParts:
        """Materialize, then write back edits made to owned value objects."""
        self.materialize()
        for part, (synced, obj) in self._objects.items():
            rendered = str(obj)
            if rendered != synced:
                self._parts.set(part, normalize_part_value(part, rendered))
                self._objects[part] = (rendered, obj)
        return self._parts

    def materialize(self) -> "Url":
        """
        Parse the source string into parts. Does nothing once materialized.

        Raises:
            InvalidUrlError: If the source string cannot be decomposed
        """
        if self._materialized:
            return self

        if self._raw is not None:
            parsed = self.parser.parse_url(self._raw)
            for name, value in parsed.items():
                if value is not None:
                    self._parts.set(Part(name), value)

        self._materialized = True
        return self

    def set_raw(self, raw: Any) -> "Url":
        """Replace the source string, dropping every part."""
        self._raw = None if raw is None else str(raw)
        self._parts.clear()
        self._objects.clear()
        self._materialized = False
        return self

    def get(self, part: Union[str, Part]) -> Any:
        """
        Read one part.

        Raises:
            UnknownPartError: If ``part`` is not a part name
        """
        part = Part.coerce(part)
        return self._current().get(part)

    def set(self, part: Union[str, Part], value: Any) -> "Url":
        """
        Overwrite one part.

        Path, Query and Fragment objects are stored as their string form.
        Passing the object this Url handed out keeps it owned; any other
        value detaches the previously handed-out object.

        Returns:
            self, for chaining
        """
        part = Part.coerce(part)
        parts = self._current()
        stored = normalize_part_value(part, value)
        parts.set(part, stored)

        owned = self._objects.pop(part, None)
        if owned is not None and owned[1] is value:
            self._objects[part] = (str(value), value)
        return self

    def join(self, other: Union["Url", str]) -> "Url":
        """
        Merge another URL over this one.

        Every part the other URL defines replaces the current value; parts
        it leaves out are kept. This is not RFC 3986 reference resolution:
        "../" segments are not resolved.

        The other URL must have a host or be an absolute path ("/a?b=1").
        Query-only and fragment-only references ("?page=2", "#top") do not
        parse; use set("query", ...) or set("fragment", ...) instead.

        Args:
            other: Url (its parts are used directly) or string (parsed with
                this Url's parser)

        Returns:
            self, for chaining

        Raises:
            InvalidUrlError: If ``other`` is a string that cannot be parsed
        """
        parts = self._current()

        if isinstance(other, Url):
            incoming = other.to_dict()
        else:
            incoming = self.parser.parse_url(other)

        for name, value in incoming.items():
            if value is not None:
                part = Part(name)
                parts.set(part, normalize_part_value(part, value))
                self._objects.pop(part, None)
        return self

    def refresh(self) -> "Url":
        """Recompute derived parts from the current host, path and query."""
        parts = self._current()
        derived = self.parser.derive(parts.host, parts.path, parts.query)
        for name, value in derived.items():
            parts.set(Part(name), value)
        return self

    def _value_object(self, part: Part, factory: type) -> Any:
        parts = self._current()
        owned = self._objects.get(part)
        if owned is None:
            obj = factory(parts.get(part))
            owned = (str(obj), obj)
            self._objects[part] = owned
        return owned[1]

    def get_path(self) -> Path:
        """Path object owned by this Url; edits to it change the path."""
        return self._value_object(Part.PATH, Path)

    def get_query(self) -> Query:
        """Query object owned by this Url; edits to it change the query."""
        return self._value_object(Part.QUERY, Query)

    def get_fragment(self) -> Fragment:
        """Fragment object owned by this Url; edits to it change the fragment."""
        return self._value_object(Part.FRAGMENT, Fragment)

    def is_absolute(self) -> bool:
        """True when both scheme and host are present."""
        parts = self._current()
        return bool(parts.scheme and parts.host)

    @property
    def netloc(self) -> str:
        """user:password@host:port, leaving out absent pieces."""
        parts = self._current()

        netloc = ""
        if parts.user:
            netloc = parts.user
            if parts.password:
                netloc += f":{parts.password}"
            netloc += "@"

        host = parts.host or ""
        if ":" in host:
            host = f"[{host}]"
        netloc += host

        if parts.port is not None:
            netloc += f":{parts.port}"
        return netloc

    def _relative(self) -> str:
        parts = self._parts
        rendered = "/" + (parts.path or "").lstrip("/")
        if parts.query:
            rendered += f"?{parts.query}"
        if parts.fragment:
            rendered += f"#{parts.fragment}"
        return rendered

    def to_string(self) -> str:
        """
        Render the URL.

        Absolute URLs render as scheme://netloc/path?query#fragment, others
        as /path?query#fragment.
        """
        self._current()
        if not self.is_absolute():
            return self._relative()
        return f"{self._parts.scheme}://{self.netloc}{self._relative()}"

    def to_dict(self) -> dict[str, Any]:
        """All parts keyed by part name."""
        return self._current().to_dict()

    def copy(self) -> "Url":
        """Independent Url with the same source, parser and state."""
        clone = Url(self._raw, self._parser)
        if self._materialized:
            self._current()
        clone._parts = UrlParts(**self._parts.to_dict())
        clone._materialized = self._materialized
        return clone

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Url):
            return self.to_string() == other.to_string()
        if isinstance(other, str):
            return self.to_string() == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        if not self._materialized:
            return f"Url({self._raw!r}, materialized=False)"
        return f"Url({self.to_string()!r})"


def parse(url: Any, parser: Optional[Parser] = None) -> Url:
    """Create an unmaterialized Url for ``url``."""
    return Url(url, parser)
