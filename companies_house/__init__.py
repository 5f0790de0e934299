"""
Companies House Lookup — CRN validation and registry search.

Architecture: Validator (fail fast) → Lookup Service → Registry Client
Philosophy:  Reject bad input locally. Never hide an upstream failure.
"""

__version__ = "1.0.0"
