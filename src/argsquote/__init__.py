"""
argsquote - Quote shell arguments for build-tool argument properties.

Turns an argument list into one string that Gradle's --args or Maven's
-Dexec.args can split back into the same arguments.
"""

from __future__ import annotations

__version__ = "0.1.0"

from argsquote.core.quoter import BothQuoteCharsPresent, quote_args

__all__ = ["quote_args", "BothQuoteCharsPresent", "__version__"]
