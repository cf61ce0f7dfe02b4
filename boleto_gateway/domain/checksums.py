"""Check digit algorithms used by the barcode and the typeable line

All functions take a digit string, walk it right to left and return a
single digit character.
"""

from boleto_gateway.domain.models import DigitField


def modulo10(value: str) -> str:
    """
    Modulo-10 check digit for a typeable line group.

    Weights alternate 2, 1, 2, 1... starting at the rightmost digit. Products
    with two digits are replaced by the sum of their digits.

    Rules on the total:
    - total < 10: digit is 10 - total (0 when the total is 0)
    - total mod 10 == 0: digit is 0
    - otherwise: digit is 10 - (total mod 10)
    """
    digits = DigitField.of(value, name="modulo10 input").digits
    total = 0
    weight = 2
    for digit in reversed(digits):
        product = digit * weight
        if product >= 10:
            product = product // 10 + product % 10
        total += product
        weight = 1 if weight == 2 else 2

    if total < 10:
        return str((10 - total) % 10)
    if total % 10 == 0:
        return "0"
    return str(10 - total % 10)


def _modulo11_result(value: str) -> int:
    # Weights cycle 2..9 from the right
    digits = DigitField.of(value, name="modulo11 input").digits
    total = 0
    weight = 2
    for digit in reversed(digits):
        total += digit * weight
        weight = weight + 1 if weight < 9 else 2
    return 11 - (total % 11)


def modulo11(value: str) -> str:
    """Modulo-11 check digit, 0 when 11 - (sum mod 11) exceeds 9"""
    result = _modulo11_result(value)
    if result > 9:
        return "0"
    return str(result)


def modulo11_no_zero(value: str) -> str:
    """Modulo-11 check digit that never yields 0: results 0 or above 9 become 1"""
    result = _modulo11_result(value)
    if result == 0 or result > 9:
        return "1"
    return str(result)
