
#
# Python-hdseed -- BIP-39 Mnemonic and BIP-32 HD Wallet Key Derivation
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-hdseed is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-hdseed is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

import dataclasses
import hashlib
import hmac
import logging

from typing		import Optional, Union

from ecdsa		import SECP256k1, SigningKey, VerifyingKey
from ecdsa.ellipticcurve import INFINITY
from Crypto.Hash	import RIPEMD160

from .defaults		import MASTER_HMAC_KEY, SEED_LENGTHS, HARDENED, DEPTH_MAX
from .exceptions	import (
    KeyTreeError, InvalidMasterKey, KeyOutOfRange, DerivationOverflow, DepthExceeded, IndexOverflow,
)
from .path		import DerivationPath, parse
from .util		import scrubbed

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

#
# secp256k1 group arithmetic.  Valid private scalars lie in [1, CURVE_ORDER-1]
#
CURVE_ORDER			= SECP256k1.order
GENERATOR			= SECP256k1.generator


def hmac_sha512( key: bytes, data: Union[bytes,bytearray] ) -> bytes:
    return hmac.new( key, data, hashlib.sha512 ).digest()


def hash160( data: bytes ) -> bytes:
    """RIPEMD-160( SHA-256( data )), the BIP-32 key identifier hash."""
    return RIPEMD160.new( hashlib.sha256( data ).digest() ).digest()


def public_from_private( private_key: bytes ) -> bytes:
    """The 33-byte compressed public point k*G of the 32-byte private scalar k."""
    return SigningKey.from_string( private_key, curve=SECP256k1 ).get_verifying_key().to_string( "compressed" )


def point_from_public( public_key: bytes ):
    """Decode (and validate) a 33-byte compressed public key into its curve point."""
    return VerifyingKey.from_string( public_key, curve=SECP256k1 ).pubkey.point


def public_from_point( point ) -> bytes:
    return VerifyingKey.from_public_point( point, curve=SECP256k1 ).to_string( "compressed" )


def step_name( index: int, hardened: bool ) -> str:
    return f"{index}'" if hardened else f"{index}"


@dataclasses.dataclass( frozen=True )
class ExtendedKey:
    """A BIP-32 HD Wallet node: a key plus its chain code, and its position in the tree.

    A private-capable node holds its 32-byte private scalar; a public-only ("neutered") node has
    private_key None, and can derive only the public keys of its normal (non-hardened) descendants.
    Both always carry the 33-byte compressed public key, from which the fingerprint is computed.

    Every derivation returns a new ExtendedKey; none is ever modified.  The private scalar is
    elided from the repr, so that logging a key never exposes it.

    """
    chain_code: bytes
    public_key: bytes
    private_key: Optional[bytes]	= dataclasses.field( default=None, repr=False )
    depth: int			= 0
    index: int			= 0		# Child number; high bit set iff hardened
    parent_fingerprint: bytes	= bytes( 4 )

    def __post_init__( self ):
        assert len( self.chain_code ) == 32, \
            f"Chain code must be 32 bytes, not {len( self.chain_code )}"
        assert len( self.public_key ) == 33 and self.public_key[0] in (2, 3), \
            "Public key must be a 33-byte compressed secp256k1 point"
        assert self.private_key is None or len( self.private_key ) == 32, \
            "Private key must be a 32-byte secp256k1 scalar"
        assert 0 <= self.depth <= DEPTH_MAX, \
            f"Depth must be in the range [0,{DEPTH_MAX}], not {self.depth}"
        assert 0 <= self.index < 2 * HARDENED, \
            f"Child index must be a uint32, not {self.index}"
        assert len( self.parent_fingerprint ) == 4, \
            "Parent fingerprint must be 4 bytes"

    @property
    def is_private( self ) -> bool:
        return self.private_key is not None

    @property
    def hardened( self ) -> bool:
        return bool( self.index & HARDENED )

    @property
    def child_number( self ) -> int:
        """The index of this key within its parent, w/o the hardened bit."""
        return self.index & ( HARDENED - 1 )

    @property
    def identifier( self ) -> bytes:
        return hash160( self.public_key )

    @property
    def fingerprint( self ) -> bytes:
        return self.identifier[:4]

    @classmethod
    def from_seed( cls, seed: Union[bytes,bytearray] ) -> ExtendedKey:
        return master_from_seed( seed )

    def neuter( self ) -> ExtendedKey:
        return neuter( self )

    def derive_child( self, index: int, hardened: bool = False ) -> ExtendedKey:
        return derive_child( self, index, hardened=hardened )

    def derive_path( self, path: Union[str,DerivationPath] ) -> ExtendedKey:
        return derive_path( self, path )


def master_from_seed( seed: Union[bytes,bytearray] ) -> ExtendedKey:
    """Produce the BIP-32 master (depth 0) ExtendedKey from a 128- to 512-bit seed, via
    HMAC-SHA512( "Bitcoin seed", seed ); the left 256 bits is the private scalar, the right the
    chain code.  A scalar of 0 or >= the curve order is invalid, and is reported (never adjusted).

    """
    lo,hi			= SEED_LENGTHS
    if not lo <= len( seed ) <= hi:
        raise InvalidMasterKey( f"A {len( seed )*8}-bit seed was supplied; {lo*8} to {hi*8} bits required" )
    I				= hmac_sha512( MASTER_HMAC_KEY, seed )
    IL,IR			= I[:32],I[32:]
    if not 0 < int.from_bytes( IL, 'big' ) < CURVE_ORDER:
        raise InvalidMasterKey( f"The {len( seed )*8}-bit seed yields an invalid master private key" )
    master			= ExtendedKey(
        chain_code	= IR,
        public_key	= public_from_private( IL ),
        private_key	= IL,
    )
    log.debug( f"Derived master key {master.fingerprint.hex()} from {len( seed )*8}-bit seed" )
    return master


def derive_child(
    parent: ExtendedKey,
    index: int,
    hardened: bool		= False,
) -> ExtendedKey:
    """Derive the child ExtendedKey at index (< 2^31) of parent, hardened or normal.

    Hardened children hash the parent private scalar, so are reachable only from a private parent.
    Normal children hash the parent public key, so a public-only parent can derive their public keys
    as IL*G + K_par, without any private scalar ever being involved; a private parent derives the
    corresponding private scalar as IL + k_par (mod n), whose public key is the same point.

    If IL >= n, or the resultant key is 0 (or the point at infinity), this index has no valid key;
    KeyOutOfRange is raised, and it is up to the caller to decide whether to try the next index.

    """
    if not 0 <= index < HARDENED:
        raise IndexOverflow( f"Derivation index {index} must be in the range [0,{HARDENED})" )
    if parent.depth >= DEPTH_MAX:
        raise DepthExceeded( f"Cannot derive beyond depth {DEPTH_MAX}" )
    if hardened:
        if not parent.is_private:
            raise DerivationOverflow( f"Cannot derive hardened child {index}' from a public-only key" )
        child_number		= index | HARDENED
        data			= bytearray( b'\x00' + parent.private_key + child_number.to_bytes( 4, 'big' ))
    else:
        child_number		= index
        data			= bytearray( parent.public_key + child_number.to_bytes( 4, 'big' ))
    with scrubbed( data ):
        I			= hmac_sha512( parent.chain_code, data )
    IL,IR			= int.from_bytes( I[:32], 'big' ),I[32:]
    if IL >= CURVE_ORDER:
        raise KeyOutOfRange( f"Child {step_name( index, hardened )} tweak exceeds the curve order; no valid key at this index" )

    if parent.is_private:
        k			= ( IL + int.from_bytes( parent.private_key, 'big' )) % CURVE_ORDER
        if k == 0:
            raise KeyOutOfRange( f"Child {step_name( index, hardened )} private key is zero; no valid key at this index" )
        private_key		= k.to_bytes( 32, 'big' )
        public_key		= public_from_private( private_key )
    else:
        point			= GENERATOR * IL + point_from_public( parent.public_key )
        if point == INFINITY:
            raise KeyOutOfRange( f"Child {index} public key is the point at infinity; no valid key at this index" )
        private_key		= None
        public_key		= public_from_point( point )

    child			= ExtendedKey(
        chain_code	= IR,
        public_key	= public_key,
        private_key	= private_key,
        depth		= parent.depth + 1,
        index		= child_number,
        parent_fingerprint = parent.fingerprint,
    )
    log.debug( f"Derived {'private' if child.is_private else 'public'} child {step_name( index, hardened )} at depth {child.depth}" )
    return child


def neuter( key: ExtendedKey ) -> ExtendedKey:
    """Irreversibly drop the private scalar, retaining the public key, chain code and position."""
    if not key.is_private:
        return key
    return dataclasses.replace( key, private_key=None )


def derive_path(
    root: ExtendedKey,
    path: Union[str,DerivationPath],
) -> ExtendedKey:
    """Derive each step of path in turn from root.  Any failure is raised w/ the 0-based .step index
    (and .path) attached, distinguishing "this branch is unreachable from this key" from a bad path.

    A hardened step is never reachable from a public-only root, nor on a public "M/..." path; this
    is detected before any derivation is attempted.  An "M/..." path always yields a public-only key.

    """
    if isinstance( path, str ):
        path			= parse( path )
    if path.public or not root.is_private:
        for step,(index,hardened) in enumerate( path ):
            if hardened:
                exc		= DerivationOverflow(
                    f"Hardened index {index}' unreachable from a public-only "
                    + ( "path" if path.public else "key" ))
                exc.step,exc.path = step,str( path )
                raise exc
    key				= root
    for step,(index,hardened) in enumerate( path ):
        try:
            key			= derive_child( key, index, hardened=hardened )
        except KeyTreeError as exc:
            exc.step,exc.path	= step,str( path )
            raise
    if path.public:
        key			= neuter( key )
    return key
