
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

import hashlib
import logging
import secrets

from typing		import Optional, Sequence, Union

from .defaults		import (
    BITS_DEFAULT, BITS_BIP39, WORDS_BIP39, WORD_BITS, LANGUAGE_DEFAULT,
    PBKDF2_ROUNDS, PBKDF2_SALT, SEED_BYTES,
)
from .exceptions	import InvalidEntropyLength, InvalidWordCount, UnknownWord, ChecksumMismatch
from .util		import commas, ordinal, scrubbed
from .wordlist		import wordlist, nfkd

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )

# All Entropy is obtained here, so that it may be substituted in one place (eg. for testing)
RANDOM_BYTES			= secrets.token_bytes


def mnemonic_words( mnemonic: Union[str,Sequence[str]] ) -> list:
    """Split a mnemonic sentence (on any whitespace, including the Japanese IDEOGRAPHIC SPACE) into
    its words; a sequence of words is returned as a list.

    """
    if isinstance( mnemonic, str ):
        return nfkd( mnemonic ).split()
    return [ nfkd( w ) for w in mnemonic ]


def checksum_bits( entropy: bytes ) -> int:
    """The first ENT/32 bits of SHA-256( entropy ), as an integer."""
    cs_bits			= len( entropy ) * 8 // 32
    return hashlib.sha256( entropy ).digest()[0] >> ( 8 - cs_bits )


def entropy_to_mnemonic(
    entropy: bytes,
    language: str		= LANGUAGE_DEFAULT,
) -> str:
    """Encode 128- to 256-bit entropy as a BIP-39 Mnemonic sentence.  The entropy is extended by
    ENT/32 bits of its own SHA-256 checksum, and the resultant bits are consumed 11 at a time, most
    significant first, each selecting one word.

    """
    ent_bits			= len( entropy ) * 8
    if ent_bits not in BITS_BIP39:
        raise InvalidEntropyLength( f"A {ent_bits}-bit entropy was supplied; One of {commas( BITS_BIP39, final='or' )} bits expected" )
    cs_bits			= ent_bits // 32
    bits			= int.from_bytes( entropy, 'big' ) << cs_bits | checksum_bits( entropy )
    count			= ( ent_bits + cs_bits ) // WORD_BITS
    table			= wordlist( language )
    return table.separator.join(
        table.word( bits >> ( WORD_BITS * i ) & ( 2 ** WORD_BITS - 1 ))
        for i in reversed( range( count ))
    )


def generate(
    strength: Optional[int]	= None,
    language: str		= LANGUAGE_DEFAULT,
) -> str:
    """Produce a new BIP-39 Mnemonic from strength bits (default 128) of fresh, cryptographically
    secure entropy.

    """
    if strength is None:
        strength		= BITS_DEFAULT
    if strength not in BITS_BIP39:
        raise InvalidEntropyLength( f"A {strength}-bit strength was specified; One of {commas( BITS_BIP39, final='or' )} bits expected" )
    with scrubbed( bytearray( RANDOM_BYTES( strength // 8 ))) as entropy:
        return entropy_to_mnemonic( bytes( entropy ), language=language )


def to_entropy(
    mnemonic: Union[str,Sequence[str]],
    language: str		= LANGUAGE_DEFAULT,
) -> bytes:
    """Recover the original entropy from a BIP-39 Mnemonic, verifying its checksum."""
    words			= mnemonic_words( mnemonic )
    if len( words ) not in WORDS_BIP39:
        raise InvalidWordCount( f"A {len( words )}-word Mnemonic was supplied; One of {commas( sorted( WORDS_BIP39 ), final='or' )} words expected" )
    table			= wordlist( language )
    bits			= 0
    for i,w in enumerate( words ):
        try:
            bits		= bits << WORD_BITS | table.index( w )
        except UnknownWord as exc:
            raise UnknownWord( f"The {ordinal( i+1 )} word: {exc}" ) from None

    ent_bits			= WORDS_BIP39[len( words )]
    cs_bits			= ent_bits // 32
    entropy			= ( bits >> cs_bits ).to_bytes( ent_bits // 8, 'big' )
    checksum			= bits & ( 2 ** cs_bits - 1 )
    if checksum != checksum_bits( entropy ):
        raise ChecksumMismatch( f"BIP-39 Mnemonic {cs_bits}-bit checksum {checksum:#x} invalid; expected {checksum_bits( entropy ):#x}" )
    return entropy


def check(
    mnemonic: Union[str,Sequence[str]],
    language: str		= LANGUAGE_DEFAULT,
) -> bool:
    """Confirm that the Mnemonic is composed of valid words, w/ a valid checksum."""
    try:
        to_entropy( mnemonic, language=language )
    except ( InvalidWordCount, UnknownWord, ChecksumMismatch ) as exc:
        log.info( f"BIP-39 Mnemonic check fails: {exc}" )
        return False
    return True


def to_seed(
    mnemonic: Union[str,Sequence[str]],
    passphrase: Optional[Union[str,bytes]] = None,
) -> bytes:
    """Stretch a Mnemonic sentence and optional passphrase into a 512-bit Seed, using 2048 rounds of
    PBKDF2-HMAC-SHA512 keyed by the sentence, salted with "mnemonic" + passphrase.

    No checking is done of either the Mnemonic Phrase or the passphrase; any text whatsoever yields
    a deterministic Seed.  Only a fully validated Mnemonic should ever be supplied here!

    """
    if passphrase is None:
        passphrase		= ""
    if isinstance( passphrase, bytes ):
        passphrase		= passphrase.decode( 'UTF-8' )
    sentence			= ' '.join( mnemonic_words( mnemonic ))
    with scrubbed(
        bytearray( sentence.encode( 'UTF-8' )),
        bytearray( nfkd( PBKDF2_SALT + passphrase ).encode( 'UTF-8' )),
    ) as (password, salt):
        return hashlib.pbkdf2_hmac( 'sha512', password, salt, PBKDF2_ROUNDS, SEED_BYTES )
