import os

from setuptools import setup

#
# All platforms
#
HERE				= os.path.dirname( os.path.abspath( __file__ ))


def requirements( name ):
    # Remove whitespace, elide blank lines and comments
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )


install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'hdseed/version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( 'version.py', 'r' ).read() )

package_dir			= {
    "hdseed":			"./hdseed",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
Creating Ethereum, Bitcoin and other accounts is complex and fraught
with potential for loss of funds.

The [python-hdseed] project implements the two standards underlying
nearly every modern cryptocurrency wallet:

- [BIP-39] Mnemonic Phrases: encode 128- to 256-bit random entropy as
  12 to 24 words from a standard 2048-word list (with a checksum), and
  stretch the phrase (and an optional passphrase) into a 512-bit seed.
- [BIP-32] Hierarchical Deterministic (HD) Wallets: derive a master
  extended key from the seed, and from it a tree of child key pairs
  addressed by [derivation path] (eg. *m/44'/60'/0'/0/0*), including
  public-only (xpub) derivation of normal children.

Extended keys may be exchanged in the standard Base58Check "xprv..." /
"xpub..." serialization.

    >>> import hdseed
    >>> mnemonic = hdseed.generate( 128 )
    >>> seed = hdseed.to_seed( mnemonic, "passphrase" )
    >>> key = hdseed.master_from_seed( seed ).derive_path( "m/44'/60'/0'/0/0" )
    >>> hdseed.encode( key.neuter() )
    'xpub6...'

Bad input is always reported via a specific exception (eg. UnknownWord,
ChecksumMismatch, KeyOutOfRange, MalformedPath); every one is a
ValueError.

[BIP-39] <https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki>

[BIP-32] <https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki>

[derivation path]
<https://medium.com/myetherwallet/hd-wallets-and-derivation-paths-explained-865a643c7bf2>
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]

setup(
    name			= "hdseed",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Standards-compliant BIP-39 Mnemonic and BIP-32 HD Wallet key derivation",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Ethereum Bitcoin cryptocurrency BIP-39 BIP-32 mnemonic seed HD wallet xpub",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
