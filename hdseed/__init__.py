
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
from .exceptions	import *  # noqa F403
from .wordlist		import Wordlist, wordlist, wordlists, languages  # noqa F401
from .bip39		import generate, to_entropy, to_seed, entropy_to_mnemonic, check  # noqa F401
from .path		import DerivationPath, parse, path_edit, path_hardened, path_parser, path_sequence  # noqa F401
from .bip32		import ExtendedKey, master_from_seed, derive_child, neuter, derive_path  # noqa F401
from .xkey		import serialize, deserialize, encode, decode  # noqa F401
from .recovery		import produce_bip39, recover_bip39, detect_language  # noqa F401
from .api		import random_secret, is_xkey, root_key, default_path, account, accounts, create, Details  # noqa F401
from .version		import __version__  # noqa F401

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"
