
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
Every failure to encode, decode or derive is a ValueError (invalid input), so callers that only
care about "was this usable?" may catch that; callers that need to distinguish causes may catch
the specific classes below.
"""

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"


class HDSeedError( ValueError ):
    pass


#
# BIP-39 Mnemonic encoding/decoding
#
class MnemonicError( HDSeedError ):
    pass


class InvalidEntropyLength( MnemonicError ):
    pass


class InvalidWordCount( MnemonicError ):
    pass


class UnknownWord( MnemonicError ):
    pass


class ChecksumMismatch( MnemonicError ):
    pass


#
# BIP-32 Key Tree derivation
#
class KeyTreeError( HDSeedError ):
    """A derivation failure.  When raised by derive_path, the 0-based .step of the path that failed
    and the .path itself are attached, so a caller can tell which branch is unreachable.

    """
    step			= None
    path			= None

    def __str__( self ):
        message			= super().__str__()
        if self.step is not None:
            message	       += f" (at step {self.step} of {self.path})"
        return message


class InvalidMasterKey( KeyTreeError ):
    pass


class KeyOutOfRange( KeyTreeError ):
    pass


class DerivationOverflow( KeyTreeError ):
    pass


class DepthExceeded( KeyTreeError ):
    pass


#
# Derivation paths
#
class PathError( HDSeedError ):
    pass


class MalformedPath( PathError ):
    pass


class IndexOverflow( PathError ):
    pass


#
# Serialized extended keys
#
class InvalidExtendedKey( HDSeedError ):
    pass
