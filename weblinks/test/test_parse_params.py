from unittest.mock import Mock

import pytest

from weblinks.errors import ParamKeyNotFound, ParamMissingEquals, ParamValueUnterminatedQuote
from weblinks.parse import _parse_param, _parse_param_value, _parse_params, _parse_token


@pytest.mark.parametrize('s, token, rest', [
    ('rel="next"', 'rel', '="next"'),
    ('title*=x', 'title', '*=x'),
    ('hreflang', 'hreflang', ''),
    ('tïtle=x', 'tïtle', '=x'),
])
def test_parse_token(s, token, rest):
    assert _parse_token(s) == (token, rest)


@pytest.mark.parametrize('s', ['', '*title=x', '1=x', '-x=y'])
def test_parse_token_not_found(s):
    with pytest.raises(ParamKeyNotFound) as exc:
        _parse_token(s)
    assert str(exc.value) == 'no token found'
    assert exc.value.remainder == s


@pytest.mark.parametrize('s, value, rest', [
    ('"hello, God; it\'s me"; rel=x', "hello, God; it's me", '; rel=x'),
    ('""', '', ''),
    ('text/html; media=screen', 'text/html', ' media=screen'),
    ('screen ; hreflang=en', 'screen', '; hreflang=en'),
    ('next, <http://example.com/>', 'next', ' <http://example.com/>'),
    ('en/us', 'en/us', ''),
    ('', '', ''),
])
def test_parse_param_value(s, value, rest):
    assert _parse_param_value(s, Mock()) == (value, rest)


def test_parse_param_value_unterminated():
    with pytest.raises(ParamValueUnterminatedQuote):
        _parse_param_value('"never closed; rel=x', Mock())


def test_parse_param_skips_leading_whitespace():
    assert _parse_param('  title="x" rest', Mock()) == (('title', 'x'), ' rest')


def test_parse_param_wraps_value_error():
    with pytest.raises(ParamValueUnterminatedQuote) as exc:
        _parse_param('title="x', Mock())
    assert str(exc.value) == 'could not parse param value: expected " but found none'


def test_parse_param_requires_equals():
    with pytest.raises(ParamMissingEquals) as exc:
        _parse_param('title "x"', Mock())
    assert str(exc.value) == "expected '=' but found ' '"


def test_parse_params_stops_at_comma():
    (rels, attributes), rest = _parse_params(' rel="a b"; title="t", <http://example.com/>', Mock())
    assert rels == ['a', 'b']
    assert attributes == {'title': 't'}
    assert rest == '<http://example.com/>'


def test_parse_params_skips_empty_params():
    (rels, attributes), rest = _parse_params(';; rel=a;;', Mock())
    assert rels == ['a']
    assert attributes == {}
    assert rest == ''


def test_parse_params_later_rel_replaces_earlier():
    (rels, attributes), rest = _parse_params('rel=a; rel="b c"', Mock())
    assert rels == ['b', 'c']
