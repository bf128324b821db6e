"""
Error classes raised by the utility modules.

**Conceptual**: Every helper in this package either returns a normal value or
raises one of the exceptions below. There is no silent clamping, no integer
wraparound and no NaN-producing integer path, so callers can rely on a small,
flat taxonomy:

  - InvalidArgumentError: an input violates a precondition.
  - DivisionByZeroError: integer division by zero.
  - ArithmeticOverflowError: an integer result leaves the 64-bit signed range.

Each class also derives from the closest builtin (ValueError,
ZeroDivisionError, OverflowError) so generic handlers keep working.
"""


class ToolkitError(Exception):
    """
    Base exception for all utility errors.

    **Usage**: Catch ToolkitError to handle every failure raised by this
    package, or catch a specific subclass for fine-grained handling.
    """
    pass


class InvalidArgumentError(ToolkitError, ValueError):
    """
    Raised when an input violates a precondition.

    **Examples**: negative repeat count, empty array passed to average(),
    negative exponent in integer power(), text that does not match the fixed
    timestamp layout, out-of-range substring indices.
    """
    pass


class DivisionByZeroError(ToolkitError, ZeroDivisionError):
    """Raised on integer division by zero."""
    pass


class ArithmeticOverflowError(ToolkitError, OverflowError):
    """
    Raised when an integer result does not fit in a signed 64-bit integer.

    **Conceptual**: Python integers never overflow, so the 64-bit contract is
    enforced explicitly after each operation. The message names the operation
    and its operands.
    """
    pass
