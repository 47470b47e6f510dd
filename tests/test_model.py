"""Tests for the document and section mappings."""

import pytest

from strictini import (
    DEFAULT_SECTION, IniDocument, IniSection, KeyNotFound, SectionNotFound
)


def test_setitem_copies():
    src = {'a': '1'}
    doc = IniDocument()
    doc['s'] = src
    src['b'] = '2'
    assert 'b' not in doc['s']
    assert isinstance(doc['s'], IniSection)
    assert doc['s'].name == 's'


def test_header_is_default_section():
    doc = IniDocument()
    doc.header['k'] = 'v'
    assert doc[DEFAULT_SECTION]['k'] == 'v'
    assert doc.find(DEFAULT_SECTION, 'k') == 'v'


def test_find():
    doc = IniDocument()
    doc['s'] = {'k': 'v'}
    assert doc.find('s', 'k') == 'v'
    with pytest.raises(SectionNotFound):
        doc.find('t', 'k')
    with pytest.raises(KeyNotFound):
        doc.find('s', 'x')


def test_pairs_and_merge():
    a, b = IniDocument(), IniDocument()
    a['s'] = {'k': '1', 'x': 'keep'}
    b['s'] = {'k': '2'}
    b['t'] = {'y': 'new'}
    a.update_from(b)
    assert sorted(a.pairs()) == [
        ('s', 'k', '2'), ('s', 'x', 'keep'), ('t', 'y', 'new')]


def test_section_equality_and_repr():
    sect = IniSection('s', {'k': 'v'})
    assert sect == {'k': 'v'}
    assert str(sect) == '[s]'
    assert repr(sect) == '[s] { .cnt = 1 }'


def test_reading_header_adds_no_section():
    doc = IniDocument()
    assert len(doc.header) == 0
    assert 'k' not in doc.header
    assert DEFAULT_SECTION not in doc
    with pytest.raises(SectionNotFound):
        doc.find(DEFAULT_SECTION, 'k')


def test_writing_header_adds_section():
    doc = IniDocument()
    header = doc.header
    header['k'] = 'v'
    header['x'] = 'y'
    assert doc[DEFAULT_SECTION].to_dict() == {'k': 'v', 'x': 'y'}


def test_detached_headers_share_one_section():
    doc = IniDocument()
    a, b = doc.header, doc.header
    a['k'] = '1'
    b['x'] = '2'
    a['z'] = '3'
    assert doc[DEFAULT_SECTION].to_dict() == {'k': '1', 'x': '2', 'z': '3'}
    assert b.to_dict() == a.to_dict()
