"""
webinclude - Recursive remote include preprocessor

Splices line ranges and anchored blocks of remote files into text documents.
"""

__version__ = "1.0.0"

from .lib import Expander, replace_all, LOG, state_connectToLogger

__all__ = ["Expander", "replace_all", "LOG", "state_connectToLogger", "__version__"]
