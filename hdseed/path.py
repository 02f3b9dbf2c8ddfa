
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

import itertools
import logging
import re

from typing		import Callable, Dict, Iterator, Sequence, Tuple

from .defaults		import HARDENED
from .exceptions	import MalformedPath, IndexOverflow
from .util		import ordinal

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

log				= logging.getLogger( __package__ )


class DerivationPath:
    """An immutable sequence of (index, hardened) derivation steps, from either a private-capable
    "m" root or a public-only "M" root.

        >>> str( parse( "m/44'/60'/0'/0/0" ))
        "m/44'/60'/0'/0/0"

    """
    __slots__			= ( "steps", "public" )

    def __init__( self, steps: Sequence[Tuple[int,bool]] = (), public: bool = False ):
        steps			= tuple( (int( i ), bool( h )) for i,h in steps )
        for i,_ in steps:
            if not 0 <= i < HARDENED:
                raise IndexOverflow( f"Derivation index {i} must be in the range [0,{HARDENED})" )
        object.__setattr__( self, "steps", steps )
        object.__setattr__( self, "public", bool( public ))

    def __setattr__( self, name, value ):
        raise AttributeError( f"{self.__class__.__name__} is immutable" )

    def __eq__( self, other ):
        if not isinstance( other, DerivationPath ):
            return NotImplemented
        return ( self.steps, self.public ) == ( other.steps, other.public )

    def __hash__( self ):
        return hash( (self.steps, self.public) )

    def __len__( self ):
        return len( self.steps )

    def __iter__( self ) -> Iterator[Tuple[int,bool]]:
        return iter( self.steps )

    def __getitem__( self, item ):
        return self.steps[item]

    def __str__( self ):
        return '/'.join( [ "M" if self.public else "m" ] + [
            str( i ) + ( "'" if h else "" ) for i,h in self.steps
        ])

    def __repr__( self ):
        return f"{self.__class__.__name__}({str( self )!r})"

    @property
    def indices( self ) -> Tuple[int, ...]:
        """The BIP-32 uint32 child numbers, w/ the high bit set for hardened steps."""
        return tuple( i | HARDENED if h else i for i,h in self.steps )

    @property
    def hardened( self ) -> bool:
        """True if any step requires hardened (private key) derivation."""
        return any( h for _,h in self.steps )

    def to_bytes( self ) -> bytes:
        return b''.join( i.to_bytes( 4, 'big' ) for i in self.indices )


SEGMENT_RE			= re.compile( r"(?P<index>[0-9]+)(?P<hardened>')?" )
RANGE_RE			= re.compile( r"(?P<begin>[0-9]*)-(?P<end>[0-9]*)(?P<hardened>')?" )


def parse( text: str ) -> DerivationPath:
    """Parse a BIP-32 derivation path, eg. "m/44'/60'/0'/0/0", or "M/0/1" for a public-only path.

    The root alone ("m" or "M", optionally with a trailing "/") yields an empty path.  Segment
    indices are decimal, and must be less than 2^31 before the hardened "'" is applied.

    """
    if not isinstance( text, str ) or not text:
        raise MalformedPath( f"Empty derivation path: {text!r}" )
    root,*segs			= text.split( '/' )
    if root not in ( "m", "M" ):
        raise MalformedPath( f"Derivation path {text!r} must begin with 'm' or 'M', not {root!r}" )
    if segs == [""]:
        segs			= []
    steps			= []
    for n,seg in enumerate( segs ):
        match			= SEGMENT_RE.fullmatch( seg )
        if not match:
            raise MalformedPath( f"Derivation path {text!r} {ordinal( n+1 )} segment {seg!r} invalid" )
        index			= int( match.group( 'index' ))
        if index >= HARDENED:
            raise IndexOverflow( f"Derivation path {text!r} {ordinal( n+1 )} segment index {index} must be less than {HARDENED}" )
        steps.append( (index, bool( match.group( 'hardened' ))) )
    path			= DerivationPath( steps, public=( root == "M" ))
    log.debug( f"Parsed derivation path {text!r} into {len( path )} steps" )
    return path


def path_edit( path: str, edit: str ) -> str:
    """Apply edit to a (default) derivation path.  A complete path replaces it; a continuation
    (dots, then segments) replaces as many trailing segments of path as it supplies, and an empty
    replacement segment drops that segment:

    >>> path_edit( "m/49'/0'/0'/0/0", "../1/9" )
    "m/49'/0'/0'/1/9"
    >>> path_edit( "m/49'/0'/0'/0/0", "...3" )
    "m/49'/0'/0'/0/3"
    >>> path_edit( "m/49'/0'/0'/0/0", "..//" )
    "m/49'/0'/0'"
    >>> path_edit( "m/44'/60'/0'/0/0", "..0-4" )
    "m/44'/60'/0'/0/0-4"

    """
    if not edit.startswith( '.' ):
        return edit
    replacing			= edit.lstrip( '.' ).removeprefix( '/' ).split( '/' )
    segs			= path.split( '/' )
    keep			= len( segs ) - len( replacing )
    if keep < 1:
        raise MalformedPath( f"Path edit {edit!r} replaces {len( replacing )} segments, but {path!r} has only {len( segs ) - 1}" )
    edited			= '/'.join( segs[:keep] + [ s for s in replacing if s ] )
    log.debug( f"Edited derivation path {path!r} with {edit!r} into {edited!r}" )
    return edited


def path_hardened( path: str ) -> Tuple[str,str]:
    """Remove any non-hardened components from the end of path, eg:

    >>> path_hardened( "m/84'/0'/0'/1/2" )
    ("m/84'/0'/0'", 'm/1/2')
    >>> path_hardened( "m/1" )
    ('m/', 'm/1')
    >>> path_hardened( "m/1'" )
    ("m/1'", 'm/')
    >>> path_hardened( "m/" )
    ('m/', 'm/')
    >>> path_hardened( "m/1/2/3'/4" )
    ("m/1/2/3'", 'm/4')

    Returns the two components as a tuple of two paths; the second is the portion that remains
    derivable by the holder of the (public) key at the first.

    """
    segs			= path.split( '/' )
    # Always leaves the m/ on the hard path
    for hardened in range( 1, len( segs ) + 1 ):
        if not any( "'" in s for s in segs[hardened:] ):
            break

    hard			= 'm/' + '/'.join( segs[1:hardened] )
    soft			= 'm/' + '/'.join( segs[hardened:] )
    return hard,soft


def path_parser(
    paths: str,
    allow_unbounded: bool	= True,
) -> Tuple[str, Dict[str, Callable[[], Iterator[int]]]]:
    """Create a format and a dictionary of iterators to feed into it, from a path containing
    ranges, eg. "m/44'/60'/0-2'/0/0-4", or "m/44'/60'/0'/0/0-" (unbounded; only the first range may be).

    """
    path_segs			= paths.split( '/' )
    unbounded			= False
    ranges			= {}

    for i,s in list( enumerate( path_segs )):
        if '-' not in s:
            continue
        c			= chr(ord('a')+i)
        match			= RANGE_RE.fullmatch( s )
        if not match:
            raise MalformedPath( f"Derivation path {paths!r} {ordinal( i )} segment range {s!r} invalid" )
        tic			= bool( match.group( 'hardened' ))
        b,e			= match.group( 'begin', 'end' )
        b			= int( b or 0 )
        if e:
            e			= int( e )
            ranges[c]		= lambda b=b,e=e: range( b, e+1 )
        else:
            if not allow_unbounded or unbounded or ranges:
                raise MalformedPath(
                    f"{'Only first' if allow_unbounded else 'No'} range allowed to be unbounded;"
                    f" this is the {ordinal(len(ranges)+1)} range in {paths}" )
            unbounded		= True
            ranges[c]		= lambda b=b: itertools.count( b )
        path_segs[i]		= f"{{{c}}}" + ( "'" if tic else "" )

    path_fmt			= '/'.join( path_segs )
    return path_fmt, ranges


def path_sequence(
    path_fmt: str,
    ranges: Dict[str, Callable[[], Iterator[int]]],
) -> Iterator[str]:
    """Yield a sequence of paths, modulating the format specifiers of the
    path_fmt according to their value sources in ranges.

    For example, a

        path_fmt = "m/44'/60'/0'/0/{f}", with a
        ranges   = dict( f=lambda b=0, e=2: range( b, e+1 ) )

    would yield the paths:

        "m/44'/60'/0'/0/0"
        "m/44'/60'/0'/0/1"
        "m/44'/60'/0'/0/2"
    """
    # Start all the iterators
    viters			= {
        k: iter( l() )
        for k,l in ranges.items()
    }
    values			= {		# Initial round of values; must provide at least one
        k: next( viters[k], None )
        for k in viters
    }
    if any( v is None for v in values.values() ):
        raise MalformedPath( f"Ranges in {path_fmt!r} must yield at least an initial value" )

    while not any( v is None for v in values.values() ):
        yield path_fmt.format( **values )
        if not ranges:
            break				# No variable records at all; just one
        # Get the next value.  Working from the lowest iterator up, cycle value(s)
        for i,k in enumerate( sorted( viters.keys(), reverse=True )):
            values[k]		= next( viters[k], None )
            if values[k] is not None:
                break
            # OK, this iterable has ended.  Restart it, and cycle to the next one up, iff
            # there are remaining ranges
            if i+1 < len( ranges ):
                viters[k]	= iter( ranges[k]() )
                values[k]	= next( viters[k], None )
