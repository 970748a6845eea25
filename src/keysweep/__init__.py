"""
keysweep - audit local files for exposed wallet mnemonics and private keys.
"""

__version__ = "0.1.0"
