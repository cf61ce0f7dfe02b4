"""Domain models - immutable dataclasses for boleto inputs, layout and output"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple

from boleto_gateway.domain.exceptions import InvalidAmountError, InvalidFieldError

BARCODE_LENGTH = 44
TYPEABLE_LINE_LENGTH = 47
OUR_NUMBER_LENGTH = 15


@dataclass(frozen=True)
class DigitField:
    """Fixed-width run of decimal digits"""

    digits: Tuple[int, ...]

    @classmethod
    def of(cls, text: str, width: Optional[int] = None, name: str = "field") -> "DigitField":
        """
        Parse a digit string, enforcing its width when one is given.

        Raises:
            InvalidFieldError: text is empty, has non-digits, or has the wrong width
        """
        if not isinstance(text, str) or not text:
            raise InvalidFieldError(f"{name} must be a non-empty digit string")
        if not (text.isascii() and text.isdigit()):
            raise InvalidFieldError(f"{name} must contain only digits: {text!r}")
        if width is not None and len(text) != width:
            raise InvalidFieldError(f"{name} must have exactly {width} digits, got {len(text)}")
        return cls(tuple(int(ch) for ch in text))

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


@dataclass(frozen=True)
class BankLayout:
    """Constant values of a bank billing product sharing the FEBRABAN layout"""

    name: str = "caixa-sigcb"
    bank_id: str = "104"
    currency_code: str = "9"  # 9 = real
    billing_type: str = "2"  # 1 = registered, 2 = unregistered
    issuer_role: str = "4"  # 4 = payee issues the slip
    assignor_code_width: int = 6

    def __post_init__(self) -> None:
        DigitField.of(self.bank_id, 3, "bank_id")
        DigitField.of(self.currency_code, 1, "currency_code")
        DigitField.of(self.billing_type, 1, "billing_type")
        DigitField.of(self.issuer_role, 1, "issuer_role")
        # Free field is 25 digits: assignor + dv + 3 + 1 + 3 + 1 + 9 + dv
        if self.assignor_code_width != 6:
            raise InvalidFieldError(
                f"assignor_code_width must be 6 to fill the 25-digit free field, got {self.assignor_code_width}"
            )


CAIXA_SIGCB = BankLayout()


def amount_to_cents(amount: Decimal) -> int:
    """Convert a currency amount to cents without rounding: Decimal("1234.00") -> 123400"""
    if isinstance(amount, float):
        amount = str(amount)
    try:
        cents = Decimal(amount) * 100
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(f"Amount is not a decimal value: {amount!r}")

    if not cents.is_finite() or cents != cents.to_integral_value():
        raise InvalidAmountError(f"Amount {amount} has fractional cents")
    if cents < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}")
    return int(cents)


@dataclass(frozen=True)
class Payment:
    """Due date and amount of the slip"""

    due_date: date
    amount_cents: int

    def __post_init__(self) -> None:
        if isinstance(self.due_date, datetime):
            object.__setattr__(self, "due_date", self.due_date.date())

    @classmethod
    def from_amount(cls, due_date: date, amount: Decimal) -> "Payment":
        """Build a payment from a currency amount such as Decimal("1234.00")"""
        return cls(due_date=due_date, amount_cents=amount_to_cents(amount))


@dataclass(frozen=True)
class Payee:
    """Billing party, identified by the bank-issued assignor code"""

    assignor_code: str


@dataclass(frozen=True)
class DocumentReference:
    """Billing party's internal reference ("nosso número")"""

    our_number: str


def is_structurally_valid(barcode: Optional[str], typeable_line: Optional[str]) -> bool:
    """Both outputs present with lengths 44 and 47. Check digits are not re-verified."""
    if barcode is None or typeable_line is None:
        return False
    return len(barcode) == BARCODE_LENGTH and len(typeable_line) == TYPEABLE_LINE_LENGTH


@dataclass(frozen=True)
class Boleto:
    """Encoded payment slip"""

    payment: Payment
    payee: Payee
    document: DocumentReference
    layout: BankLayout
    barcode: str
    typeable_line: str

    @property
    def is_valid(self) -> bool:
        return is_structurally_valid(self.barcode, self.typeable_line)

    @property
    def general_check_digit(self) -> str:
        return self.barcode[4]

    @property
    def due_date_factor(self) -> str:
        return self.barcode[5:9]

    @property
    def amount_field(self) -> str:
        return self.barcode[9:19]

    @property
    def free_field(self) -> str:
        return self.barcode[19:44]
