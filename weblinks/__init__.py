"""Parse HTTP Link header values (RFC 8288) into links keyed by relation type."""
from .errors import (InvalidURIReference, LinkParseError, MissingClosingDelimiter, MissingOpeningDelimiter,
                     NoParameters, ParamKeyNotFound, ParamMissingEquals, ParamValueUnterminatedQuote)
from .links import Link, Links
from .parse import parse
from .uri import URIReference, URIReferenceError, parse_uri_reference

__all__ = (
    "InvalidURIReference",
    "Link",
    "LinkParseError",
    "Links",
    "MissingClosingDelimiter",
    "MissingOpeningDelimiter",
    "NoParameters",
    "ParamKeyNotFound",
    "ParamMissingEquals",
    "ParamValueUnterminatedQuote",
    "URIReference",
    "URIReferenceError",
    "parse",
    "parse_uri_reference",
)
