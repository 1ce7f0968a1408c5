"""Validation checks base interface.

This module defines the protocol (interface) that all reason checks must implement.
Each check is responsible for one reason code: it looks at a cleaned (trimmed,
uppercased, non-empty) value and reports whether its rule is broken.

To implement a new reason check:

1. Add the code to ``ReasonCode`` in ``core/enums.py`` (declaration order is
   emission order)
2. Define a class in this directory that implements the ReasonCheck protocol
3. Add an instance to the ALL_CHECKS list in registry.py, in enumeration order

Example:
    ```python
    # checks/my_check.py
    from pan_validation.core.enums import ReasonCode

    class MyCheck:
        reason = ReasonCode.MY_CODE

        def detect(self, cleaned: str) -> bool:
            # True when the value breaks the rule
            return ...
    ```
"""

from __future__ import annotations

from typing import Protocol

from pan_validation.core.enums import ReasonCode


class ReasonCheck(Protocol):
    """Protocol defining the interface for reason checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.

    Attributes:
        reason: Reason code emitted when the rule is broken.

    Methods:
        detect: Return True when the cleaned value breaks the rule.
    """

    reason: ReasonCode

    def detect(self, cleaned: str) -> bool:
        """Run the check on one cleaned value.

        Checks are total: any non-empty text is ordinary input, including
        values that are too short for the segment being inspected.

        Args:
            cleaned: Trimmed, uppercased, non-empty value.

        Returns:
            True if the reason applies to the value, False otherwise.

        Examples:
            >>> LengthCheck().detect("ABCDE1234")
            True
        """
        ...


__all__ = ["ReasonCheck"]
