import pytest

from atoms import Definition, NumberLiteral, UnknownWord
from dictionary import Dictionary
from intrinsics import Add, Dup


class TestDictionary():
    def test_lookup_missing(self):
        d = Dictionary()

        assert d.lookup('FOO') is None
        assert not d.contains('FOO')
        assert 'FOO' not in d

    def test_define_and_lookup(self):
        d = Dictionary()
        add = Add()
        d.define('+', add)

        assert d.lookup('+') is add
        assert d.contains('+')

    def test_case_insensitive(self):
        d = Dictionary()
        dup = Dup()
        d.define('dup', dup)

        assert d.lookup('DUP') is dup
        assert d.lookup('Dup') is dup
        assert 'dUp' in d

    def test_redefine_rebinds(self):
        d = Dictionary()
        first = Definition('FOO', [NumberLiteral(1)])
        second = Definition('FOO', [NumberLiteral(2)])
        d.define('FOO', first)
        d.define('FOO', second)

        assert d.lookup('FOO') is second
        assert [atom.value for atom in first.body] == [1]

    def test_names_sorted(self):
        d = Dictionary()
        d.define('swap', Definition('SWAP', []))
        d.define('+', Add())

        assert d.names() == ['+', 'SWAP']

    def test_describe(self):
        d = Dictionary()
        d.define('FOO', Definition('FOO', [NumberLiteral(1), Add()]))

        assert '1' in d.describe('foo')
        assert '+' in d.describe('foo')

    def test_describe_unknown(self):
        with pytest.raises(UnknownWord):
            Dictionary().describe('FOO')
