"""Tests for serializing documents back to text."""

from io import StringIO

import pytest

import strictini
from strictini import IniDocument, UnrepresentableToken, dump, dumps
from strictini.writer import escape


def sample() -> IniDocument:
    doc = IniDocument()
    doc['server'] = {'host': 'localhost', 'port': '8080'}
    # inserted last, but must still come before any header.
    doc.header['default_key'] = '1'
    return doc


def test_dumps_layout():
    assert dumps(sample()) == (
        'default_key = 1\n'
        '\n'
        '[server]\n'
        'host = localhost\n'
        'port = 8080\n'
    )


def test_dumps_options():
    text = dumps(sample(), delimiter='=', blank_lines=0)
    assert text == 'default_key=1\n[server]\nhost=localhost\nport=8080\n'


def test_dumps_empty_document():
    assert dumps(IniDocument()) == ''


def test_dump_to_stream():
    buf = StringIO()
    dump(sample(), buf)
    assert buf.getvalue() == dumps(sample())


def test_escape():
    assert escape('a;b=c[d]e\\f g') == 'a\\;b\\=c\\[d\\]e\\\\f g'


def test_output_reads_back():
    doc = IniDocument()
    doc.header['\\'] = '=;'
    doc[' padded name '] = {'[k]': ']v[', 'empty': ''}
    cfg = strictini.loads(dumps(doc))
    assert cfg.document.to_dict() == doc.to_dict()


@pytest.mark.parametrize('section, key, value', [
    ('s', 'k', 'has space'),
    ('s', 'has space', 'v'),
    ('s', 'k', 'tab\there'),
    ('s', 'k', 'two\nlines'),
    ('s', '', 'v'),
    ('bad\tname', 'k', 'v'),
    ('bad\nname', 'k', 'v'),
])
def test_unrepresentable(section, key, value):
    doc = IniDocument()
    doc[section] = {key: value}
    with pytest.raises(UnrepresentableToken):
        dumps(doc)


def test_bad_delimiter():
    with pytest.raises(ValueError):
        dumps(sample(), delimiter=':')
