from collections.abc import Mapping
from types import MappingProxyType


class Link:
    """One `<uri>; params` entry from a Link header.

    A link with several relation types is stored under each of them in `Links`, and every key refers to this
    same object.
    """
    def __init__(self, uri, attributes=None, rels=()):
        self._uri = uri
        self._attributes = MappingProxyType(dict(attributes or {}))
        self._rels = tuple(rels)

    @property
    def uri(self):
        return self._uri

    @property
    def attributes(self):
        return self._attributes

    @property
    def rels(self):
        return self._rels

    def __repr__(self):
        params = [f'rel="{" ".join(self._rels)}"'] + [f'{k}="{v}"' for k, v in self._attributes.items()]
        return f'<Link <{self._uri}>; {"; ".join(params)}>'

    def __eq__(self, other):
        if not isinstance(other, Link):
            return NotImplemented
        return (str(self._uri), dict(self._attributes), self._rels) == \
            (str(other._uri), dict(other._attributes), other._rels)

    def __hash__(self):
        return hash((str(self._uri), self._rels))


class Links(Mapping):
    """Read-only mapping of relation type to `Link`."""
    def __init__(self):
        self._links = {}

    def _add(self, link):
        for rel in link.rels:
            self._links[rel] = link

    def unique(self):
        """Return each distinct link once, in the order first seen."""
        seen = {}
        for link in self._links.values():
            seen.setdefault(id(link), link)
        return list(seen.values())

    def __getitem__(self, rel):
        return self._links[rel]

    def __iter__(self):
        return iter(self._links)

    def __len__(self):
        return len(self._links)

    def __repr__(self):
        return f'<Links {", ".join(self._links)}>'
