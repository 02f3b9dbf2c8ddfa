import contextlib
import hashlib


class substitute( contextlib.ContextDecorator ):
    """Replace the named attribute of a thing (eg. a module's RANDOM_BYTES) w/ a substitute value for
    the duration; usable as a context manager, or as a function decorator:

        @substitute( bip39, 'RANDOM_BYTES', nonrandom_bytes )
        def test_something():
            ...

    """
    def __init__( self, thing, attribute, value ):
        self.thing		= thing
        self.attribute		= attribute
        self.value		= value
        self.saved		= None

    def __enter__( self ):
        self.saved		= getattr( self.thing, self.attribute )
        setattr( self.thing, self.attribute, self.value )

    def __exit__( self, *exc ):
        setattr( self.thing, self.attribute, self.saved )


def nonrandom_bytes( length ):
    """A deterministic stand-in for secrets.token_bytes; each call yields the next bytes of a
    SHA-256 hash chain, so repeated calls yield different (but reproducible) entropy.

    """
    nonrandom_bytes.state	= hashlib.sha256( nonrandom_bytes.state ).digest()
    result			= nonrandom_bytes.state
    while len( result ) < length:
        result		       += hashlib.sha256( result ).digest()
    return result[:length]


nonrandom_bytes.state		= b''


def nonrandom_reset():
    nonrandom_bytes.state	= b''


SEED_ZERO			= b'\x00' * 16
SEED_ONES			= b'\xff' * 16
SEED_XMAS			= bytes.fromhex( "dd0e2f02b1f6c92a1a265561bc164135" )

# BIP-32 test vectors 1-3: https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#test-vectors
SEED_VECTOR_1			= bytes.fromhex( "000102030405060708090a0b0c0d0e0f" )
SEED_VECTOR_2			= bytes.fromhex(
    "fffcf9f6f3f0edeae7e4e1dedbd8d5d2cfccc9c6c3c0bdbab7b4b1aeaba8a5a2"
    "9f9c999693908d8a8784817e7b7875726f6c696663605d5a5754514e4b484542"
)
SEED_VECTOR_3			= bytes.fromhex(
    "4b381541583be4423346c643850da4b320e46a87ae3d2a4e6da11eba819cd4ac"
    "ba45d239319ac14f863b8d5ab5a0d0c64d2e8a1e7d1457df2e5a3c51c73235be"
)

MNEMONIC_ABANDON		= "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
SEED_ABANDON			= bytes.fromhex(
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)
