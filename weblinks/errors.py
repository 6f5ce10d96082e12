class LinkParseError(ValueError):
    """Raised when a Link header value cannot be parsed.

    `remainder` is the unparsed text at the point of failure and `links` holds whatever entries were
    committed before the failing one (set by `weblinks.parse`).
    """
    def __init__(self, message, remainder='', links=None):
        super().__init__(message)
        self.message = message
        self.remainder = remainder
        self.links = links

    def wrap(self, context, remainder=None):
        if remainder is None:
            remainder = self.remainder
        wrapped = self.__class__(f'{context}: {self.message}', remainder)
        wrapped.links = self.links
        return wrapped

    def __repr__(self):
        return f'<{self.__class__.__name__} {self.message!r} remainder={self.remainder!r}>'


class MissingOpeningDelimiter(LinkParseError):
    pass


class MissingClosingDelimiter(LinkParseError):
    pass


class InvalidURIReference(LinkParseError):
    pass


class NoParameters(LinkParseError):
    """The URI reference was not followed by a parameter list; `link` is the entry parsed so far."""
    def __init__(self, message, remainder='', links=None, link=None):
        super().__init__(message, remainder, links)
        self.link = link

    def wrap(self, context, remainder=None):
        wrapped = super().wrap(context, remainder)
        wrapped.link = self.link
        return wrapped


class ParamKeyNotFound(LinkParseError):
    pass


class ParamMissingEquals(LinkParseError):
    pass


class ParamValueUnterminatedQuote(LinkParseError):
    pass
