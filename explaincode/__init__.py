"""explaincode: explain selected code via a remote API and render the result as HTML."""

from explaincode.rendering import render

__version__ = "0.1.0"

__all__ = ["render", "__version__"]
