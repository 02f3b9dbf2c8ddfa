import unicodedata

import pytest

from mnemonic		import Mnemonic

from .wordlist		import Wordlist, wordlist, wordlists, languages
from .exceptions	import UnknownWord


def test_wordlist_english():
    table			= wordlist()
    assert table.language == "english"
    assert table.separator == " "
    assert len( table ) == 2048
    assert table.word( 0 ) == "abandon"
    assert table.word( 2047 ) == "zoo"
    assert table.index( "abandon" ) == 0
    assert table.index( "zoo" ) == 2047
    assert "about" in table
    assert "xyzzy" not in table
    assert 3 not in table

    with pytest.raises( UnknownWord ):
        table.index( "xyzzy" )


def test_wordlist_bijection():
    for language,table in wordlists().items():
        assert len( set( table ) ) == 2048, \
            f"{language} table has duplicates"
        for i,w in enumerate( table ):
            assert table.index( w ) == i
            assert table.word( i ) == w


def test_wordlist_shared():
    assert wordlist( "english" ) is wordlist( "english" )
    assert wordlist( language="english" ) is wordlist( "english" )


def test_wordlist_immutable():
    table			= wordlist()
    with pytest.raises( AttributeError ):
        table.language		= "french"
    with pytest.raises( TypeError ):
        table.words[0]		= "xyzzy"


def test_wordlist_malformed():
    with pytest.raises( AssertionError ):
        Wordlist( "short", [ "abandon", "ability" ] )
    with pytest.raises( AssertionError ):
        Wordlist( "dupes", [ "abandon" ] * 2048 )


def test_wordlist_languages():
    assert "english" in languages()
    assert "japanese" in languages()
    assert wordlist( "japanese" ).separator == "\u3000"
    with pytest.raises( ValueError ):
        wordlist( "klingon" )


def test_wordlist_normalized():
    """Tables with accented words (eg. spanish, french) are matched in either composed or
    decomposed form."""
    table			= wordlist( "spanish" )
    accented			= [ w for w in Mnemonic( "spanish" ).wordlist if any( ord( c ) > 127 for c in w ) ]
    assert accented
    for w in accented[:10]:
        composed		= unicodedata.normalize( "NFC", w )
        decomposed		= unicodedata.normalize( "NFD", w )
        assert composed != decomposed
        assert composed in table and decomposed in table
        assert table.index( composed ) == table.index( decomposed )


def test_wordlist_expand():
    table			= wordlist()
    assert table.expand( "acti" ) == "action"
    assert table.expand( "abandon" ) == "abandon"
    assert table.expand( "ab" ) == "ab"			# ambiguous; unchanged
    assert table.expand( "qqq" ) == "qqq"			# unknown; unchanged
    assert all( table.expand( p ) == Mnemonic( "english" ).expand_word( p ) for p in ( "acti", "abou", "ab", "zo" ))
    # A composed (NFC) accented prefix expands to the decomposed table word
    assert wordlist( "spanish" ).expand( "ába" ) == unicodedata.normalize( "NFKD", "ábaco" )
