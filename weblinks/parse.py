"""Parse the value of an HTTP Link header as described in RFC 8288 (previously RFC 5988):

    Link: <http://example.com/TheBook/chapter2>; rel="previous"; title="previous chapter"

Each layer consumes the front of the string and returns what it parsed along with the unparsed rest. Failures are
raised as `LinkParseError` subclasses and wrapped with context by the layer that called the failing one.
"""
import logging
import re

from .errors import (InvalidURIReference, LinkParseError, MissingClosingDelimiter, MissingOpeningDelimiter,
                     NoParameters, ParamKeyNotFound, ParamMissingEquals, ParamValueUnterminatedQuote)
from .links import Link, Links
from .uri import URIReferenceError, parse_uri_reference

log = logging.getLogger(__name__)

_UNQUOTED_END = re.compile(r'[ ;,]')


def parse(value, log=log):
    """Parse a Link header value into a `Links` mapping of relation type to `Link`.

    Links declaring several relation types appear under each of them; when two links declare the same relation
    type the later one wins. Links without a rel parameter are dropped.

    On failure a `LinkParseError` is raised with `links` holding the entries parsed before the failing one.

    Trace output goes to `log` at DEBUG level.
    """
    links = Links()
    s = (value or '').strip()
    while s:
        try:
            link, rest = _parse_link(s, log)
        except NoParameters as e:
            if e.remainder.strip():
                e.links = links
                raise
            # a bare <uri> is only acceptable as the final entry
            log.debug(f'dropping {e.link!r}: no params')
            break
        except LinkParseError as e:
            e.links = links
            raise
        log.debug(f'after _parse_link rest = "{rest}"')
        if not link.rels:
            log.debug(f'dropping {link!r}: no rel')
        # links can be associated with multiple rels, separated by a space (section 3.3)
        links._add(link)
        s = rest.strip()
    return links


def _parse_link(s, log):
    if not s.startswith('<'):
        raise MissingOpeningDelimiter('link does not begin with <', s)
    s = s[1:]
    end = s.find('>')
    if end == -1:
        raise MissingClosingDelimiter('link does not end with >', s)
    try:
        uri = parse_uri_reference(s[:end])
    except URIReferenceError as e:
        raise InvalidURIReference(f'link could not be parsed: {e}', s) from e

    s = s[end + 1:].lstrip()
    if not s.startswith(';'):
        raise NoParameters('no params found', s, link=Link(uri))

    try:
        (rels, attributes), rest = _parse_params(s[1:], log)
    except LinkParseError as e:
        raise e.wrap('params could not be parsed') from e

    # the "anchor" param overrides the target when it is itself a valid reference
    if 'anchor' in attributes:
        try:
            uri = parse_uri_reference(attributes['anchor'])
        except URIReferenceError as e:
            log.debug(f'ignoring anchor "{attributes["anchor"]}": {e}')

    return Link(uri, attributes, rels), rest


def _parse_params(s, log):
    # e.g. rel="previous"; title="hello, God; it's me, margaret"
    rels = []
    attributes = {}
    s = s.strip()
    while s:
        if s[0] == ',':
            # next link follows
            return (rels, attributes), s[1:].strip()
        if s[0] == ';':
            s = s[1:].strip()
            continue

        (key, value), rest = _parse_param(s, log)
        if key == 'rel':
            rels = value.split(' ')
        else:
            attributes[key] = value
        s = rest.strip()
    return (rels, attributes), s


def _parse_param(s, log):
    s = s.lstrip()
    key, s = _parse_token(s)
    log.debug(f'_parse_token = {key}')

    if not s:
        raise ParamMissingEquals("expected '=' but found end of string", s)
    if s[0] != '=':
        raise ParamMissingEquals(f"expected '=' but found '{s[0]}'", s)

    try:
        value, rest = _parse_param_value(s[1:], log)
    except LinkParseError as e:
        raise e.wrap('could not parse param value') from e
    log.debug(f'_parse_param_value {value}, remaining = "{rest}"')
    return (key, value), rest


def _parse_param_value(s, log):
    if s.startswith('"'):
        # no escaping inside quoted strings, the value runs to the next quote
        end = s.find('"', 1)
        if end == -1:
            raise ParamValueUnterminatedQuote('expected " but found none', s)
        return s[1:end], s[end + 1:]

    # the delimiter that ends an unquoted value is consumed along with it
    m = _UNQUOTED_END.search(s)
    if m is None:
        value, rest = s, ''
    else:
        value, rest = s[:m.start()], s[m.end():]
    log.debug(f'nonquoted: value = "{value}", rest = "{rest}"')
    return value, rest


def _parse_token(s):
    end = next((i for i, c in enumerate(s) if not c.isalpha()), len(s))
    if end == 0:
        raise ParamKeyNotFound('no token found', s)
    return s[:end], s[end:]
