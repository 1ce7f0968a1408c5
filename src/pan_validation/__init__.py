"""PAN Validation Tools: diagnostic validation of PAN-like identifiers.

The package classifies raw identifier strings into Missing / Valid / Invalid,
records every rule an invalid value breaks, and summarizes a batch of results
(counts, reason frequencies, masked examples and reason co-occurrence).
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
