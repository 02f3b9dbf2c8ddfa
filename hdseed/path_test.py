import pytest

from .path		import DerivationPath, parse, path_edit, path_hardened, path_parser, path_sequence
from .defaults		import HARDENED
from .exceptions	import PathError, MalformedPath, IndexOverflow


def test_parse():
    path			= parse( "m/44'/60'/0'/0/0" )
    assert list( path ) == [ (44, True), (60, True), (0, True), (0, False), (0, False) ]
    assert not path.public
    assert path.hardened
    assert len( path ) == 5
    assert path[0] == (44, True)
    assert path.indices == ( 44 + HARDENED, 60 + HARDENED, HARDENED, 0, 0 )
    assert str( path ) == "m/44'/60'/0'/0/0"
    assert repr( path ) == "DerivationPath(\"m/44'/60'/0'/0/0\")"
    assert path == DerivationPath( [ (44, True), (60, True), (0, True), (0, False), (0, False) ] )
    assert hash( path ) == hash( parse( str( path )))

    public			= parse( "M/0/1" )
    assert public.public
    assert not public.hardened
    assert list( public ) == [ (0, False), (1, False) ]
    assert str( public ) == "M/0/1"
    assert public != parse( "m/0/1" )

    assert parse( "m/2147483647'" ).indices == ( 2 ** 32 - 1, )
    assert parse( "m/0/1000000000" ).to_bytes() == bytes.fromhex( "000000003b9aca00" )


@pytest.mark.parametrize( "text", [ "m", "m/", "M", "M/" ] )
def test_parse_root( text ):
    path			= parse( text )
    assert len( path ) == 0
    assert path.public == text.startswith( "M" )


@pytest.mark.parametrize( "text", [
    "", "x/0", "/0", "0", "44'/0", "m0", "mm/0", "m//0", "m/0/", "m/-1", "m/+1", "m/ 1", "m/1 ",
    "m/1h", "m/1H", "m/1''", "m/'", "m/0x10", "m/1.5", "m/١", "m/1\n", "n/0",
])
def test_parse_malformed( text ):
    with pytest.raises( MalformedPath ):
        parse( text )


@pytest.mark.parametrize( "text", [ "m/2147483648", "m/2147483648'", "m/0/4294967296", "M/99999999999" ])
def test_parse_overflow( text ):
    with pytest.raises( IndexOverflow ):
        parse( text )


def test_path_errors():
    for text in ( None, 44, b"m/0" ):
        with pytest.raises( MalformedPath ):
            parse( text )
    with pytest.raises( PathError ):
        parse( "m/2147483648" )
    with pytest.raises( ValueError ):
        parse( "x/0" )
    with pytest.raises( IndexOverflow ):
        DerivationPath( [ (HARDENED, False) ] )
    with pytest.raises( AttributeError ):
        parse( "m/0" ).public		= True


def test_path_edit():
    assert path_edit( "m/49'/0'/0'/0/0", "../1/9" ) == "m/49'/0'/0'/1/9"
    assert path_edit( "m/49'/0'/0'/0/0", "...3" ) == "m/49'/0'/0'/0/3"
    assert path_edit( "m/49'/0'/0'/0/0", "..//" ) == "m/49'/0'/0'"
    assert path_edit( "m/49'/0'/0'/0/0", "m/1/2" ) == "m/1/2"
    assert path_edit( "m/44'/60'/0'/0/0", "..0-4" ) == "m/44'/60'/0'/0/0-4"
    assert path_edit( "m/", "..0" ) == "m/0"
    with pytest.raises( MalformedPath ):
        path_edit( "m/0", "../1/2/3" )


def test_path_hardened():
    assert path_hardened( "m/84'/0'/0'/1/2" ) == ("m/84'/0'/0'", "m/1/2")
    assert path_hardened( "m/1" ) == ("m/", "m/1")
    assert path_hardened( "m/1'" ) == ("m/1'", "m/")
    assert path_hardened( "m/" ) == ("m/", "m/")
    assert path_hardened( "m/1/2/3'/4" ) == ("m/1/2/3'", "m/4")


def test_path_ranges():
    path_fmt,ranges		= path_parser( "m/44'/60'/0'/0/0-4" )
    assert path_fmt == "m/44'/60'/0'/0/{f}"
    assert list( path_sequence( path_fmt, ranges )) == [
        f"m/44'/60'/0'/0/{i}" for i in range( 5 )
    ]

    path_fmt,ranges		= path_parser( "m/44'/60'/0-1'/0/2-3" )
    assert list( path_sequence( path_fmt, ranges )) == [
        "m/44'/60'/0'/0/2",
        "m/44'/60'/0'/0/3",
        "m/44'/60'/1'/0/2",
        "m/44'/60'/1'/0/3",
    ]

    # No ranges; just the one path
    assert list( path_sequence( *path_parser( "m/44'/60'/0'/0/0" ))) == [ "m/44'/60'/0'/0/0" ]

    # Unbounded; arbitrarily many paths may be produced
    sequence			= path_sequence( *path_parser( "m/0/-" ))
    assert [ next( sequence ) for _ in range( 3 ) ] == [ "m/0/0", "m/0/1", "m/0/2" ]
    sequence			= path_sequence( *path_parser( "m/5-'" ))
    assert [ next( sequence ) for _ in range( 2 ) ] == [ "m/5'", "m/6'" ]

    with pytest.raises( MalformedPath ):
        path_parser( "m/0/-", allow_unbounded=False )
    with pytest.raises( MalformedPath ):
        path_parser( "m/0-3/-" )
    # Malformed ranges are reported as such, not as some incidental conversion failure
    for malformed in ( "m/0-1-2", "m/x-2", "m/1-y", "m/0'-2'", "m/0-2''" ):
        with pytest.raises( MalformedPath ):
            path_parser( malformed )

    # Every produced path is parseable
    for path in path_sequence( *path_parser( "m/44'/60'/0-2'/0/0-2" )):
        assert len( parse( path )) == 5
