"""Validation-library integration.

Python 3.13+.
"""

from .messages import ValidatorMessages, ValidatorWildcardCallback

__all__ = ["ValidatorMessages", "ValidatorWildcardCallback"]
