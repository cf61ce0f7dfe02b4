"""Domain-specific exceptions"""


class BoletoError(Exception):
    """Base exception for boleto encoding"""

    pass


class AmountTooLargeError(BoletoError):
    """Amount does not fit in the 10-digit amount field"""

    pass


class InvalidAmountError(BoletoError):
    """Amount is negative, not an integer, or has fractional cents"""

    pass


class InvalidFieldError(BoletoError):
    """A fixed-width field has the wrong width or non-digit content"""

    pass


class CheckDigitMismatchError(BoletoError):
    """Typeable line group does not match its modulo-10 check digit"""

    def __init__(self, group: int, expected: str, found: str) -> None:
        self.group = group
        self.expected = expected
        self.found = found
        super().__init__(f"Group {group} check digit mismatch: expected {expected}, found {found}")
