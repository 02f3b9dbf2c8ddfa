
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
from __future__          import annotations

import logging
import string

from collections	import namedtuple
from typing		import Dict, Iterator, Optional, Tuple, Union

from .			import bip39, xkey
from .bip32		import ExtendedKey, master_from_seed, derive_path
from .defaults		import PATH_DEFAULT, CRYPTO_PATHS, LANGUAGE_DEFAULT
from .exceptions	import KeyOutOfRange
from .path		import parse, path_edit, path_hardened, path_parser, path_sequence
from .recovery		import produce_bip39, recover_bip39
from .util		import into_bytes, scrubbed, commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

XKEY_PREFIXES			= ( 'xprv', 'xpub', 'tprv', 'tpub' )


def random_secret(
    seed_length: Optional[int]
) -> bytes:
    """Generates a new random secret.

    NOTE: There is a slightly less than 1 / 2^127 chance that any given random secret will lead to
    an invalid BIP-32 master key!  This is because the HMAC-SHA512 derived 256-bit private key must
    be non-zero and less than the secp256k1 curve order:

        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

    We cannot generate secrets that are guaranteed to be valid at every derived HD Wallet path; the
    secret is put through a complex hashing procedure for each key at each path.  The probability of
    this occurring is so vanishingly small that we simply report it (InvalidMasterKey or
    KeyOutOfRange), if it ever does.

    """
    assert seed_length, \
        f"Must supply a non-zero length in bytes, not {seed_length}"
    return bip39.RANDOM_BYTES( seed_length )


def is_xkey( master_secret: Union[str,bytes] ) -> bool:
    return isinstance( master_secret, str ) and master_secret.strip()[:4] in XKEY_PREFIXES


def root_key(
    master_secret: Union[str,bytes],
    passphrase: Optional[Union[bytes,str]] = None,  # If a mnemonic is provided, its passphrase
    language: Optional[str]	= None,
) -> ExtendedKey:
    """Produce the BIP-32 root ExtendedKey from the supplied master_secret.

    If the master_secret is bytes, it is the Seed, used as-is.  If a str, then we generally expect
    it to be a hex Seed.  However, this is where we detect alternatives: a BIP-39 Mnemonic contains
    whitespace, and a serialized "{x,t}{pub,prv}..." extended key is identifiable by its prefix,
    which is incompatible with hex, so there is no ambiguity.

    """
    if isinstance( master_secret, str ):
        master_secret		= master_secret.strip()
    if isinstance( master_secret, (bytes,bytearray) ) or master_secret[:2].lower() == "0x" or all(
        c in string.hexdigits for c in master_secret
    ):
        # Probably a binary/hex Seed.
        with scrubbed( bytearray( into_bytes( master_secret ))) as seed:
            root		= master_from_seed( seed )
        log.debug( f"Created root {root.fingerprint.hex()} from {len( seed )*8}-bit seed" )
    elif len( master_secret.split() ) > 1:
        # A Mnemonic; this is the only valid use of whitespace (incl. IDEOGRAPHIC SPACE) within a master_secret.
        with scrubbed( bytearray( recover_bip39( master_secret, passphrase=passphrase, language=language ))) as seed:
            root		= master_from_seed( seed )
        log.debug( f"Created root {root.fingerprint.hex()} from BIP-39 Mnemonic{' and passphrase' if passphrase else ''}" )
    elif is_xkey( master_secret ):
        root			= xkey.decode( master_secret )
        log.debug( f"Created root {root.fingerprint.hex()} from {master_secret[:4]} key at depth {root.depth}" )
    else:
        raise ValueError(
            f"Only hex seeds, BIP-39 Mnemonics or {commas( XKEY_PREFIXES, final='or' )} keys supported; {master_secret[:8]+'...'!r} supplied" )
    return root


def default_path(
    master_secret: Union[str,bytes],
    crypto: Optional[str]	= None,
) -> str:
    """Paths from an extended key are relative to it; Seeds and Mnemonics default to the crypto's path."""
    if is_xkey( master_secret ):
        return "m/"
    if crypto:
        try:
            return CRYPTO_PATHS[crypto.upper()]
        except KeyError:
            raise ValueError( f"{crypto!r} not supported; specify one of {commas( CRYPTO_PATHS, final='or' )}" ) from None
    return PATH_DEFAULT


def account(
    master_secret: Union[str,bytes],
    path: Optional[str]		= None,  # default to the crypto's path (or PATH_DEFAULT), or a partial path editing it
    passphrase: Optional[Union[bytes,str]] = None,  # If a mnemonic is provided, passphrase optional
    language: Optional[str]	= None,
    crypto: Optional[str]	= None,  # eg. 'ETH', 'BTC'; selects the default path
) -> ExtendedKey:
    """Generate an HD wallet ExtendedKey from the supplied master_secret seed, Mnemonic or extended
    key, at the given HD derivation path.

    """
    # A partial path (eg. "../1/3") edits the trailing segments of the default path
    if path:
        path			= path_edit( default_path( master_secret, crypto=crypto ), path )
    else:
        path			= default_path( master_secret, crypto=crypto )
    root			= root_key( master_secret, passphrase=passphrase, language=language )
    key				= derive_path( root, path )
    log.debug( f"Created {'private' if key.is_private else 'public'} key {key.fingerprint.hex()} at derivation path {path}" )
    return key


def accounts(
    master_secret: Union[str,bytes],
    paths: Optional[str]	= None,  # default to the crypto's path; allow ranges
    allow_unbounded: bool	= True,
    passphrase: Optional[Union[bytes,str]] = None,
    language: Optional[str]	= None,
    crypto: Optional[str]	= None,
) -> Iterator[Tuple[str,ExtendedKey]]:
    """Yield (path, key) for each path in paths, which may contain ranges, eg. "m/84'/0'/0'/0/0-4", or
    "m/84'/0'/0'/0/-" (unbounded).

    The root key is produced only once (the BIP-39 seed stretching is expensive), and the key at the
    hardened prefix of each path is reused until the prefix changes.  A path with no valid key is
    reported and skipped; the next index is the customary replacement.

    """
    if paths:
        paths			= path_edit( default_path( master_secret, crypto=crypto ), paths )
    else:
        paths			= default_path( master_secret, crypto=crypto )
    root			= root_key( master_secret, passphrase=passphrase, language=language )
    prefix: Dict[str,ExtendedKey] = {}			# { hardened path: key }, most recent only
    for path in path_sequence( *path_parser(
        paths		= paths,
        allow_unbounded	= allow_unbounded,
    )):
        try:
            if parse( path ).public:
                key		= derive_path( root, path )
            else:
                hard,soft	= path_hardened( path )
                if hard not in prefix:
                    prefix	= { hard: derive_path( root, hard ) }
                key		= derive_path( prefix[hard], soft )
        except KeyOutOfRange as exc:
            log.warning( f"Skipping derivation path {path}: {exc}" )
            continue
        yield path, key


Details = namedtuple( 'Details', ('mnemonic', 'language', 'accounts') )


def create(
    strength: Optional[int]	= None,				# Default: 128
    passphrase: Optional[Union[bytes,str]] = None,
    language: Optional[str]	= None,				# Default: english
    paths: Optional[str]	= None,				# Default: PATH_DEFAULT; bounded ranges allowed
    crypto: Optional[str]	= None,
) -> Details:
    """Creates a new BIP-39 Mnemonic from fresh Entropy, and the HD wallet key(s) it (and the optional
    passphrase) yields at the given path(s).  Returns the Details.

    The Mnemonic is the only backup required; every key is recoverable from it (and the passphrase).

    """
    language			= language or LANGUAGE_DEFAULT
    mnemonic			= produce_bip39( strength=strength, language=language )
    accts			= list( accounts(
        mnemonic,
        paths		= paths,
        allow_unbounded	= False,
        passphrase	= passphrase,
        language	= language,
        crypto		= crypto,
    ))
    log.info( f"Created {len( mnemonic.split() )}-word {language} BIP-39 Mnemonic w/ {len( accts )} accounts" )
    return Details( mnemonic, language, accts )
