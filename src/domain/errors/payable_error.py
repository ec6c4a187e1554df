"""Payable domain errors.

Error value constants for payable validation and lookups. Returned inside
Failure results, never raised.
"""


class PayableError:
    """Payable error constants."""

    INVALID_VALUE = "Payable value must be a finite number"
    PAYABLE_NOT_FOUND = "Payable not found"
    ASSIGNOR_NOT_FOUND = "Assignor referenced by payable not found"
    ASSIGNOR_REFERENCE_MISSING = "Payable references an assignor that no longer exists"


class MissingAssignorReference(Exception):
    """Raised when a payable's assignor is gone at join-read time.

    Payable repositories raise this from find_with_assignor_by_id instead of
    returning None, so a dangling reference is never mistaken for an unknown
    payable. Query handlers convert it into a Failure.

    Attributes:
        payable_id: Payable whose reference is dangling.
        assignor_id: Assignor id that could not be resolved.
    """

    def __init__(self, payable_id: object, assignor_id: object) -> None:
        self.payable_id = payable_id
        self.assignor_id = assignor_id
        super().__init__(f'Assignor with ID "{assignor_id}" does not exist')
