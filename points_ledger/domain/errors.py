"""Points ledger error codes and fatal conditions"""

# Codes carried by libs.result.Error for expected outcomes
EMPTY_LEDGER = "EMPTY_LEDGER"
INSUFFICIENT_POINTS = "INSUFFICIENT_POINTS"

EMPTY_LEDGER_MESSAGE = "No available point balance"
INSUFFICIENT_POINTS_MESSAGE = "Not enough points left"


class EngineInvariantViolation(RuntimeError):
    """
    The deduction engine needed points but the ledger had none available.

    Unreachable while the pre-flight guards hold; raised as a programming error
    and never turned into a user-facing message.
    """
