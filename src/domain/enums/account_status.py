"""Account activation status."""

from enum import Enum


class AccountStatus(str, Enum):
    """Activation status of an account.

    New accounts start INACTIVE and become ACTIVE once the email verification
    passcode is confirmed. There is no transition back to INACTIVE.
    """

    INACTIVE = "INACTIVE"
    ACTIVE = "ACTIVE"
