
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

import logging

from typing		import List, Optional, Union

from mnemonic		import Mnemonic
from mnemonic.mnemonic	import ConfigurationError

from .			import bip39
from .defaults		import LANGUAGE_DEFAULT
from .exceptions	import InvalidEntropyLength, UnknownWord
from .wordlist		import wordlist, nfkd

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


def normalize( mnemonic: str ) -> str:
    """Polish up a mnemonic (often recovered as user input): NFKD normalize, down-case, and remove
    leading/trailing and repeated whitespace (incl. newlines, and the Japanese IDEOGRAPHIC SPACE).

    """
    return ' '.join( w.lower() for w in nfkd( mnemonic ).split() )


def detect_language( mnemonic: str ) -> str:
    """Find the one BIP-39 language in which every word of the mnemonic is either a word, or an
    unambiguous prefix of one (eg. 'acti' --> 'action').

    Some tables share words (eg. english/french 'abandon', or the two chinese tables), so the whole
    phrase is considered; python-mnemonic (>=0.20) narrows by prefix, and then prefers the one
    language in which some word matches exactly (eg. 'about' is also a french prefix of 'aboutir').
    If no language (or more than one) matches, the language must be supplied.

    """
    mnemonic_stripped		= normalize( mnemonic )
    if not mnemonic_stripped:
        raise UnknownWord( "No BIP-39 Mnemonic words supplied; cannot detect language" )
    try:
        return Mnemonic.detect_language( mnemonic_stripped )
    except ConfigurationError as exc:
        raise UnknownWord( f"BIP-39 Mnemonic language cannot be detected: {exc}" ) from None


def expand( mnemonic: str, language: str = LANGUAGE_DEFAULT ) -> List[str]:
    """Expand each unambiguous prefix in the (normalized) mnemonic to its full word."""
    table			= wordlist( language )
    return [ table.expand( w ) for w in normalize( mnemonic ).split() ]


def recover_bip39(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    as_entropy: Optional[bool]	= None,   # Recover original 128- to 256-bit Entropy (not 512-bit Seed)
    language: Optional[str]	= None,   # If desired, provide language (eg. if only prefixes are provided)
) -> bytes:
    """Recover the 512-bit BIP-39 generated seed (or the original 128- to 256-bit Entropy, if
    as_entropy is True) from a single BIP-39 Mnemonic Phrase, detecting the language.  Optionally
    provide a UTF-8 string or encoded passphrase (only if not as_entropy).

    Normalizes and validates the BIP-39 Mnemonic Phrase (which is often recovered as user input):
    - Removes excess whitespace and down-cases
    - Detects language if not provided
    - Expands unambiguous mnemonic prefixes (eg. 'ae' --> 'aerobic', 'acti' --> 'action')
    - Checks that the BIP-39 Phrase check bits are valid

    Since this would normally be used to begin deriving HD wallets, the default is the
    passphrase-stretched seed.

    """
    if as_entropy is None:
        as_entropy		= False
    if passphrase and as_entropy:
        raise ValueError( "When recovering original BIP-39 entropy, no passphrase may be specified" )

    mnemonic_stripped		= normalize( mnemonic )
    if mnemonic_stripped != mnemonic:
        log.info( "BIP-39 Mnemonic Phrase stripped of unnecessary whitespace" )
    if not language:
        language		= detect_language( mnemonic_stripped )
        log.info( f"BIP-39 Language detected: {language}" )
    words			= expand( mnemonic_stripped, language=language )
    if words != mnemonic_stripped.split():
        log.info( "BIP-39 Mnemonic Phrase prefixes expanded" )

    # Raises InvalidWordCount, UnknownWord or ChecksumMismatch
    entropy			= bip39.to_entropy( words, language=language )
    if as_entropy:
        log.info( f"Recovered {len( entropy )*8}-bit BIP-39 entropy from {language} mnemonic" )
        return entropy
    # Only a fully validated BIP-39 Mnemonic Phrase must ever be used here!
    seed			= bip39.to_seed( words, passphrase=passphrase )
    log.info( f"Recovered {len( seed )*8}-bit BIP-39 seed from {language} mnemonic{' (and passphrase)' if passphrase else ''}" )
    return seed


def produce_bip39(
    entropy: Optional[bytes]	= None,
    strength: Optional[int]	= None,
    language: Optional[str]	= None,
) -> str:
    """Produce a BIP-39 Mnemonic from the provided entropy (or generated, default 128 bits).

    All fresh entropy comes from bip39.RANDOM_BYTES, so it may be substituted in one place.
    """
    language			= language or LANGUAGE_DEFAULT
    if not entropy:
        return bip39.generate( strength, language=language )
    if strength and strength != len( entropy ) * 8:
        raise InvalidEntropyLength( f"A {len( entropy )*8}-bit entropy was supplied; {strength} bits specified" )
    return bip39.entropy_to_mnemonic( entropy, language=language )
