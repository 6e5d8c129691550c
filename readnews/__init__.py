"""Top-level package for the readnews Guardian search client.

This package contains the command line entrypoint and all supporting modules
for building search requests, fetching and parsing results, and presenting
them as a list of articles.
"""

__all__ = []
