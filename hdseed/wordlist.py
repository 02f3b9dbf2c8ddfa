
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
import unicodedata

from typing		import Dict, Iterator, List, Tuple

from mnemonic		import Mnemonic

from .defaults		import LANGUAGE_DEFAULT, LANGUAGE_SEPARATOR, WORDLIST_SIZE
from .exceptions	import UnknownWord
from .util		import memoize, commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


def nfkd( text: str ) -> str:
    return unicodedata.normalize( "NFKD", text )


class Wordlist:
    """An immutable BIP-39 table of exactly 2048 distinct words, addressable by 11-bit index in
    either direction.  The word data itself is the standard BIP-39 set shipped with python-mnemonic;
    we only ever read it.

    """
    __slots__			= ( "language", "separator", "_words", "_index", "_mnemonic" )

    def __init__( self, language: str, words: List[str] ):
        words			= tuple( nfkd( w.strip() ) for w in words )
        index			= { w: i for i,w in enumerate( words ) }
        # A malformed table is a packaging error, not a user input error
        assert len( words ) == WORDLIST_SIZE and len( index ) == WORDLIST_SIZE, \
            f"BIP-39 {language} wordlist must contain exactly {WORDLIST_SIZE} distinct words, not {len( index )} of {len( words )}"
        object.__setattr__( self, "language", language )
        object.__setattr__( self, "separator", LANGUAGE_SEPARATOR.get( language, " " ))
        object.__setattr__( self, "_words", words )
        object.__setattr__( self, "_index", index )
        object.__setattr__( self, "_mnemonic", Mnemonic( language, wordlist=list( words )))

    def __setattr__( self, name, value ):
        raise AttributeError( f"{self.__class__.__name__} is immutable" )

    def __repr__( self ):
        return f"{self.__class__.__name__}({self.language!r})"

    def __len__( self ):
        return len( self._words )

    def __iter__( self ) -> Iterator[str]:
        return iter( self._words )

    def __contains__( self, word ):
        return isinstance( word, str ) and nfkd( word ) in self._index

    @property
    def words( self ) -> Tuple[str, ...]:
        return self._words

    def word( self, index: int ) -> str:
        return self._words[index]

    def index( self, word: str ) -> int:
        try:
            return self._index[nfkd( word )]
        except KeyError:
            raise UnknownWord( f"{word!r} is not a BIP-39 {self.language} word" ) from None

    def expand( self, prefix: str ) -> str:
        """Expand an unambiguous prefix (eg. 'acti' --> 'action') to its full word.  Returns the
        supplied prefix unchanged, if it is already a word, or is ambiguous or unknown.

        """
        return self._mnemonic.expand_word( nfkd( prefix ))


def languages() -> List[str]:
    """The names of all available BIP-39 wordlist languages."""
    return sorted( Mnemonic.list_languages() )


@memoize
def _wordlist_load( language ):
    table			= Wordlist( language, Mnemonic( language ).wordlist )
    log.debug( f"Loaded BIP-39 {language} wordlist" )
    return table


def wordlist( language: str = LANGUAGE_DEFAULT ) -> Wordlist:
    """Returns the process-wide Wordlist for language; loaded once, then shared read-only."""
    if language not in languages():
        raise ValueError( f"BIP-39 language {language!r} not supported; specify one of {commas( languages(), final='or' )}" )
    return _wordlist_load( language )


def wordlists() -> Dict[str, Wordlist]:
    return { language: wordlist( language ) for language in languages() }
