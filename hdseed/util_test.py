import pytest

from .util		import memoize, scrubbed, ordinal, commas, into_bytes


def test_memoize():
    calls			= []

    @memoize
    def square( x ):
        calls.append( x )
        if x < 0:
            raise ValueError( "negative" )
        return x * x

    assert square( 3 ) == 9
    assert square( 3 ) == 9
    assert calls == [ 3 ]
    assert square._memo == { (3,): 9 }

    # Exceptions are not memoized
    for _ in range( 2 ):
        with pytest.raises( ValueError ):
            square( -1 )
    assert calls == [ 3, -1, -1 ]

    square.reset()
    calls.clear()
    assert square( 3 ) == 9
    assert calls == [ 3 ]


def test_scrubbed():
    secret			= bytearray( b'secret' )
    with scrubbed( secret ) as s:
        assert s is secret
        assert bytes( s ) == b'secret'
    assert secret == bytearray( 6 )

    a,b				= bytearray( b'one' ), bytearray( b'two' )
    with pytest.raises( RuntimeError ):
        with scrubbed( a, b ) as (x, y):
            assert (x, y) == (a, b)
            raise RuntimeError( "failure" )
    assert a == bytearray( 3 ) and b == bytearray( 3 )

    with pytest.raises( AssertionError ):
        with scrubbed( b'immutable' ):
            pass


def test_ordinal():
    assert [ ordinal( n ) for n in ( 1, 2, 3, 4, 11, 12, 13, 21, 22, 101, 111 ) ] \
        == [ "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "101st", "111th" ]


def test_commas():
    assert commas( [ 12, 15, 18, 21, 24 ], final='or' ) == "12, 15, 18, 21 or 24"
    assert commas( [ 1, 2, 3, 5, 7 ], final='and' ) == "1-3, 5 and 7"
    assert commas( [ "english" ] ) == "english"


def test_into_bytes():
    assert into_bytes( b'\x01\x02' ) == b'\x01\x02'
    assert into_bytes( bytearray( b'\x01' )) == b'\x01'
    assert into_bytes( "0102" ) == b'\x01\x02'
    assert into_bytes( "0XfF" ) == b'\xff'
    with pytest.raises( ValueError ):
        into_bytes( "xyz" )
