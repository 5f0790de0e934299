"""
CRN format validation.

Pure code, no network: a malformed CRN is rejected here, before the registry
is ever contacted.
"""

from __future__ import annotations

import logging

from .exceptions import InvalidCRNFormat

logger = logging.getLogger(__name__)

CRN_FORMAT_MESSAGE = "CRN should only contain alphanumeric characters"


def validate_crn(crn: str) -> str:
    """Check that a CRN is made only of letters and digits.

    Args:
        crn: The raw CRN as supplied by the caller.

    Returns:
        The CRN, unchanged.

    Raises:
        InvalidCRNFormat: if the CRN is empty or contains any symbol,
            whitespace or punctuation.
    """
    # isalnum() would also pass numeric symbols such as "½", "²" and "①"
    if not crn or not all(ch.isalpha() or ch.isdecimal() for ch in crn):
        logger.warning("Rejected malformed CRN %r", crn)
        raise InvalidCRNFormat(CRN_FORMAT_MESSAGE, details={"crn": crn})
    return crn
