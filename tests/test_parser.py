"""Tests for INI file reading and writing."""

import logging

import pytest

from strictini import (
    DEFAULT_SECTION, IniConfig, IniDocument, IniParser, SourceUnavailable,
    UnrepresentableToken
)


def test_read_file(tmp_path):
    path = tmp_path / 'rules.ini'
    path.write_text('a = 1\n[General]\nName = 尤里\n', encoding='utf-8')
    doc = IniParser(path, 'utf-8').read()
    assert doc.header['a'] == '1'
    assert doc.find('General', 'Name') == '尤里'


def test_read_into_existing_document(tmp_path):
    path = tmp_path / 'more.ini'
    path.write_text('[General]\nb = 2\n', encoding='utf-8')
    doc = IniDocument()
    doc['General'] = {'a': '1'}
    IniParser(path).read(doc)
    assert doc['General'].to_dict() == {'a': '1', 'b': '2'}


def test_decode_fallback(tmp_path, caplog):
    path = tmp_path / 'utf8.ini'
    path.write_bytes(
        '[小节]\n名字 = 尤里的复仇，心灵控制\n'.encode('utf-8'))
    with caplog.at_level(logging.WARNING):
        doc = IniParser(path, 'ascii').read()
    assert doc.find('小节', '名字') == '尤里的复仇，心灵控制'
    assert 'guessed' in caplog.text


def test_missing_file(tmp_path):
    parser = IniParser(tmp_path / 'missing.ini')
    with pytest.raises(SourceUnavailable) as e:
        parser.read()
    assert isinstance(e.value.__cause__, FileNotFoundError)


def test_readstream_accepts_lines():
    doc = IniParser.readstream(['[s]\n', 'k = v\n'], source='<lines>')
    assert doc.find('s', 'k') == 'v'


def test_write_then_read(tmp_path):
    doc = IniDocument()
    doc['odd ; name'] = {'k=1': 'a;b', 'path': 'C:\\dir', 'empty': ''}
    doc.header['top'] = '[x]'
    path = tmp_path / 'out.ini'

    parser = IniParser(path)
    parser.write(doc)
    back = parser.read()

    assert back.to_dict() == {
        DEFAULT_SECTION: {'top': '[x]'},
        'odd ; name': {'k=1': 'a;b', 'path': 'C:\\dir', 'empty': ''},
    }


def test_write_refuses_before_touching_file(tmp_path):
    path = tmp_path / 'keep.ini'
    path.write_text('a = 1\n', encoding='utf-8')
    doc = IniDocument()
    doc.header['bad'] = 'has space'
    with pytest.raises(UnrepresentableToken):
        IniParser(path).write(doc)
    assert path.read_text(encoding='utf-8') == 'a = 1\n'


def test_unknown_encoding(tmp_path):
    path = tmp_path / 'a.ini'
    path.write_text('a = 1\n', encoding='utf-8')
    with pytest.raises(SourceUnavailable) as e:
        IniParser(path, 'no-such-codec').read()
    assert isinstance(e.value.__cause__, LookupError)
    with pytest.raises(SourceUnavailable):
        IniConfig(encoding='no-such-codec').load(path)


def test_unknown_encoding_on_write(tmp_path):
    doc = IniDocument()
    doc.header['a'] = '1'
    with pytest.raises(SourceUnavailable):
        IniParser(tmp_path / 'b.ini', 'no-such-codec').write(doc)


@pytest.mark.parametrize('first_line, section, key', [
    ('[server]\n', 'server', 'host'),
    ('host = localhost\n', DEFAULT_SECTION, 'host'),
])
def test_byte_order_mark(tmp_path, first_line, section, key):
    path = tmp_path / 'notepad.ini'
    path.write_bytes(
        b'\xef\xbb\xbf' + (first_line + 'host = localhost\n').encode())
    doc = IniParser(path, 'utf-8').read()
    assert doc.find(section, key) == 'localhost'
    assert all(not k.startswith('\ufeff') for _, k, _ in doc.pairs())
