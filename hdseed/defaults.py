
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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# BIP-39 Mnemonics
#
#     https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki
#
# Entropy of ENT bits is extended by ENT/32 bits of SHA-256 checksum, and the result is split into
# 11-bit groups; each group indexes one word of a 2048-word table.
#
#    ENT | CS | ENT+CS | Words
#   -----+----+--------+-------
#    128 |  4 |    132 |    12
#    160 |  5 |    165 |    15
#    192 |  6 |    198 |    18
#    224 |  7 |    231 |    21
#    256 |  8 |    264 |    24
#
BITS_DEFAULT			= 128
BITS_BIP39			= (128, 160, 192, 224, 256)

WORD_BITS			= 11
WORDLIST_SIZE			= 2 ** WORD_BITS
WORDS_BIP39			= {  # Word count --> Entropy bits
    ( bits + bits // 32 ) // WORD_BITS: bits
    for bits in BITS_BIP39
}

LANGUAGE_DEFAULT		= "english"
LANGUAGE_SEPARATOR		= dict(
    japanese	= "\u3000",  # IDEOGRAPHIC SPACE
)

PBKDF2_ROUNDS			= 2048
PBKDF2_SALT			= "mnemonic"
SEED_BYTES			= 64

#
# BIP-32 Hierarchical Deterministic Wallets
#
#     https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki
#
MASTER_HMAC_KEY			= b"Bitcoin seed"
SEED_LENGTHS			= (16, 64)  # 128- to 512-bit seeds, inclusive

HARDENED			= 0x80000000
DEPTH_MAX			= 255

# Serialized extended keys: 4-byte version, depth, parent fingerprint, child number, chain code,
# and key data
XKEY_BYTES			= 78
XKEY_VERSIONS			= dict(
    mainnet	= dict(
        private	= 0x0488ADE4,  # xprv...
        public	= 0x0488B21E,  # xpub...
    ),
    testnet	= dict(
        private	= 0x04358394,  # tprv...
        public	= 0x043587CF,  # tpub...
    ),
)

#
# HD Wallet Derivation Paths (Standard BIP-44)
#
# BIP-44 defines the purpose of each depth level:
#    m / purpose' / coin_type' / account' / change / address_index
#
# Use https://iancoleman.io/bip39/ to confirm the derivations
#
PATH_DEFAULT			= "m/44'/60'/0'/0/0"
CRYPTO_PATHS			= dict(
    ETH		= "m/44'/60'/0'/0/0",
    BTC		= "m/84'/0'/0'/0/0",
    LTC		= "m/84'/2'/0'/0/0",
    DOGE	= "m/44'/3'/0'/0/0",
)
