"""Syntax checking for the URI references found in Link headers (RFC 3986 section 4.1).

Only the syntax is checked: references are never resolved against a base URI, that is left to the caller.
"""
import re
from urllib.parse import urlsplit


_INVALID_CHARACTER = re.compile(r'[\x00-\x20\x7f]')
_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


class URIReferenceError(ValueError):
    pass


class URIReference:
    """An absolute or relative URI reference. The string form is exactly the text that was parsed."""
    __slots__ = ('_text', '_parts')

    def __init__(self, text, parts):
        self._text = text
        self._parts = parts

    @property
    def scheme(self):
        return self._parts.scheme

    @property
    def netloc(self):
        return self._parts.netloc

    @property
    def path(self):
        return self._parts.path

    @property
    def query(self):
        return self._parts.query

    @property
    def fragment(self):
        return self._parts.fragment

    def is_absolute(self):
        return bool(self._parts.scheme)

    def __str__(self):
        return self._text

    def __repr__(self):
        return f'<URIReference {self._text!r}>'

    def __eq__(self, other):
        if isinstance(other, URIReference):
            return self._text == other._text
        return NotImplemented

    def __hash__(self):
        return hash(self._text)


def parse_uri_reference(s):
    m = _INVALID_CHARACTER.search(s)
    if m:
        raise URIReferenceError(f'invalid character {m.group()!r} in URI reference')
    m = _BAD_ESCAPE.search(s)
    if m:
        raise URIReferenceError(f'invalid escape {s[m.start():m.start() + 3]!r} in URI reference')
    try:
        parts = urlsplit(s)
        # accessing the port validates it
        parts.port
    except ValueError as e:
        raise URIReferenceError(str(e)) from e
    if not parts.scheme and not parts.netloc and ':' in parts.path.split('/', 1)[0]:
        # "1a:b" or ":b" would be read back as a scheme by a conforming parser
        raise URIReferenceError('first path segment in URI reference cannot contain colon')
    return URIReference(s, parts)
