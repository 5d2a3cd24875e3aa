"""Tests for key-level merging of documents."""

from inimerge import IniDocument, merge, merge_documents, parse


def test_merge_per_key() -> None:
    doc = parse('[section1]\nkey1 = value1\n[section2]\nkey2 = value2\n')
    doc.merge(parse('[section1]\nfoo = bar\n[section2]\nkey2 = new value\n'))
    assert doc == {
        'section1': {'key1': 'value1', 'foo': 'bar'},
        'section2': {'key2': 'new value'},
    }


def test_merge_adds_sections_and_never_removes() -> None:
    into = parse('[a]\nx = 1\n[b]\ny = 2\n')
    result = merge(into, parse('[c]\nz = 3\n'))
    assert result is into
    assert list(into.section_names()) == ['a', 'b', 'c']
    assert into['a'] == {'x': '1'}


def test_merge_does_not_alias_source() -> None:
    into = IniDocument()
    source = parse('[a]\nx = 1\n')
    into.merge(source)
    into['a']['x'] = '2'
    assert source['a']['x'] == '1'
    assert into['a'] is not source['a']


def test_merge_plain_mappings_and_none() -> None:
    into = parse('[a]\nx = 1\n')
    into.merge({' a ': {'y': '2'}})
    into.merge(None)
    assert into == {'a': {'x': '1', 'y': '2'}}


def test_merge_documents_keeps_inputs() -> None:
    framework = parse('[main]\nrealm = a.Realm\nsession = 30\n')
    user = parse('[main]\nrealm = my.Realm\n[users]\nroot = secret\n')
    result = merge_documents(framework, user)

    assert result == {
        'main': {'realm': 'my.Realm', 'session': '30'},
        'users': {'root': 'secret'},
    }
    assert framework == {'main': {'realm': 'a.Realm', 'session': '30'}}
    assert user == {
        'main': {'realm': 'my.Realm'},
        'users': {'root': 'secret'},
    }


def test_merge_documents_with_none() -> None:
    doc = parse('a = 1\n')
    assert merge_documents(None, doc) is doc
    assert merge_documents(doc, None) is doc
    assert merge_documents(None, None) is None


def test_merge_union_and_override() -> None:
    a = parse('[s]\nk1 = a1\nk2 = a2\n[only_a]\nq = 1\n')
    b = parse('[s]\nk2 = b2\nk3 = b3\n[only_b]\nr = 2\n')
    result = merge(a.copy(), b)

    assert set(result.section_names()) == (
        set(a.section_names()) | set(b.section_names()))
    for key, value in b['s'].items():
        assert result['s'][key] == value
    assert result['s']['k1'] == 'a1'
