
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

import contextlib

from typing		import Union
from functools		import wraps


__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"


#
# @util.memoize		-- Cache function results data based on positional args
#
def memoize( func ):
    """A very simple memoization wrapper based on (immutable) args only, for simplicity.  Any
    keyword arguments must be immaterial to the successful outcome.

    Only successful (non-Exception) outcomes are cached!  Use .reset() to flush all memoized data.
    """
    @wraps( func )
    def wrapper( *args, **kwds ):
        if args not in wrapper._memo:
            wrapper._memo[args] = func( *args, **kwds )
        return wrapper._memo[args]

    def reset():
        wrapper._memo	= dict()		# { args: entry, ... }

    wrapper.reset		= reset
    wrapper.reset()
    return wrapper


#
# with util.scrubbed( ... )	-- Zero sensitive mutable buffers on every exit path
#
@contextlib.contextmanager
def scrubbed( *buffers: bytearray ):
    """Yield the supplied bytearray(s) (a single one, or a tuple of several), and overwrite each
    with zeros when the block exits, whether normally or via an Exception.

    Only mutable buffers can be scrubbed; immutable bytes copies that were already made (eg. by a
    hash function's .digest()) are out of our reach.

    """
    assert all( isinstance( b, bytearray ) for b in buffers ), \
        "Only bytearray buffers may be scrubbed"
    try:
        yield buffers[0] if len( buffers ) == 1 else buffers
    finally:
        for b in buffers:
            b[:]		= bytes( len( b ))


def ordinal( num ):
    ordinal_dict		= {1: "st", 2: "nd", 3: "rd"}
    q, mod			= divmod( num, 10 )
    suffix			= q % 10 != 1 and ordinal_dict.get(mod) or "th"
    return f"{num}{suffix}"


def commas( seq, final=None ):  # supply alternative final connector, eg. 'and', 'or'
    """Replace any numeric sequences eg. 1, 2, 3, 5, 7 w/ 1-3, 5 and 7.  Caller should
    usually sort numeric values before calling."""
    def int_seq( seq ):
        for i,iv in enumerate( seq[:-1] ):
            if type(iv) in (int,float):
                for j,jv in enumerate( seq[i:] ):
                    if type(jv) not in (int,float) or jv != iv + j:
                        j      -= 1
                        break
                if j > 1:
                    return (i,i+j)
        return None
    seq				= list( seq )
    while rng := int_seq( seq ):
        beg			= seq[:rng[0]]
        nxt			= rng[1] + 1
        end			= seq[nxt:] if nxt < len( seq ) else []
        seq			= beg + [f"{seq[rng[0]]}-{seq[rng[1]]}"] + end
    if final and len(seq) > 1:
        seq			= seq[:-2] + [f"{seq[-2]} {final} {seq[-1]}"]
    return ', '.join( map( str, seq ))


def into_bytes( data: Union[bytes,bytearray,str] ) -> bytes:
    """Convert hex data w/ optional '0x' prefix into bytes"""
    if isinstance( data, (bytes,bytearray) ):
        return bytes( data )
    if data[:2].lower() == '0x':
        data		= data[2:]
    return bytes.fromhex( data )
