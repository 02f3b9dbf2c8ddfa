
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
"""
BIP-32 extended key serialization.  The 78-byte binary form is:

    version (4) | depth (1) | parent fingerprint (4) | child index (4) | chain code (32) | key (33)

where key is 0x00 + the 32-byte private scalar, or the 33-byte compressed public key.  The usual
textual form (eg. "xprv9s21ZrQH143K...") is its Base58Check encoding.
"""

from __future__		import annotations

import logging

from typing		import Tuple, Union

import base58

from ecdsa.keys		import MalformedPointError

from .bip32		import ExtendedKey, CURVE_ORDER, public_from_private, point_from_public
from .defaults		import XKEY_BYTES, XKEY_VERSIONS
from .exceptions	import InvalidExtendedKey

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

# { <version>: (<network>, <is_private>), ... }
VERSIONS			= {
    version: (network, kind == 'private')
    for network,kinds in XKEY_VERSIONS.items()
    for kind,version in kinds.items()
}


def serialize( key: ExtendedKey, testnet: bool = False ) -> bytes:
    network			= 'testnet' if testnet else 'mainnet'
    version			= XKEY_VERSIONS[network]['private' if key.is_private else 'public']
    data			= b''.join((
        version.to_bytes( 4, 'big' ),
        key.depth.to_bytes( 1, 'big' ),
        key.parent_fingerprint,
        key.index.to_bytes( 4, 'big' ),
        key.chain_code,
        b'\x00' + key.private_key if key.is_private else key.public_key,
    ))
    assert len( data ) == XKEY_BYTES
    return data


def deserialize( data: Union[bytes,bytearray], with_network: bool = False ) -> Union[ExtendedKey,Tuple[ExtendedKey,str]]:
    """Decode and validate a 78-byte serialized extended key.  Optionally, also return its network
    ('mainnet' or 'testnet').

    """
    if len( data ) != XKEY_BYTES:
        raise InvalidExtendedKey( f"Serialized extended key must be {XKEY_BYTES} bytes, not {len( data )}" )
    version			= int.from_bytes( data[0:4], 'big' )
    if version not in VERSIONS:
        raise InvalidExtendedKey( f"Unrecognized extended key version {version:#010x}" )
    network,is_private		= VERSIONS[version]
    depth			= data[4]
    parent_fingerprint		= bytes( data[5:9] )
    index			= int.from_bytes( data[9:13], 'big' )
    chain_code			= bytes( data[13:45] )
    keydata			= bytes( data[45:78] )
    if depth == 0 and ( parent_fingerprint != bytes( 4 ) or index != 0 ):
        raise InvalidExtendedKey( "Master extended key (depth 0) must have zero parent fingerprint and index" )

    if is_private:
        if keydata[0] != 0:
            raise InvalidExtendedKey( f"Private extended key data must begin with 0x00, not {keydata[0]:#04x}" )
        private_key		= keydata[1:]
        if not 0 < int.from_bytes( private_key, 'big' ) < CURVE_ORDER:
            raise InvalidExtendedKey( "Private extended key scalar out of range" )
        public_key		= public_from_private( private_key )
    else:
        if keydata[0] not in (2, 3):
            raise InvalidExtendedKey( f"Public extended key data must be a compressed point, not prefix {keydata[0]:#04x}" )
        try:
            point_from_public( keydata )
        except MalformedPointError as exc:
            raise InvalidExtendedKey( f"Public extended key is not a valid secp256k1 point: {exc}" ) from exc
        private_key		= None
        public_key		= keydata

    key				= ExtendedKey(
        chain_code	= chain_code,
        public_key	= public_key,
        private_key	= private_key,
        depth		= depth,
        index		= index,
        parent_fingerprint = parent_fingerprint,
    )
    if with_network:
        return key,network
    return key


def encode( key: ExtendedKey, testnet: bool = False ) -> str:
    """The Base58Check text form of key, eg. 'xprv...', 'xpub...', 'tprv...' or 'tpub...'."""
    return base58.b58encode_check( serialize( key, testnet=testnet )).decode( 'ascii' )


def decode( text: str, with_network: bool = False ) -> Union[ExtendedKey,Tuple[ExtendedKey,str]]:
    try:
        data			= base58.b58decode_check( text.strip() )
    except ValueError as exc:
        raise InvalidExtendedKey( f"Invalid Base58Check extended key {text[:8]+'...'!r}: {exc}" ) from exc
    key,network			= deserialize( data, with_network=True )
    log.debug( f"Decoded {network} {'private' if key.is_private else 'public'} extended key at depth {key.depth}" )
    if with_network:
        return key,network
    return key
