"""Barcode and typeable line assembly - core boleto encoding logic"""

import logging
from dataclasses import dataclass
from typing import Tuple

from boleto_gateway.domain.checksums import modulo10, modulo11, modulo11_no_zero
from boleto_gateway.domain.exceptions import CheckDigitMismatchError, InvalidFieldError
from boleto_gateway.domain.fields import FactorMode, format_amount, format_due_date_factor, split_our_number
from boleto_gateway.domain.models import (
    BARCODE_LENGTH,
    CAIXA_SIGCB,
    TYPEABLE_LINE_LENGTH,
    BankLayout,
    Boleto,
    DigitField,
    DocumentReference,
    Payee,
    Payment,
)


@dataclass(frozen=True)
class _FreeFieldInputs:
    """Validated payee and document fields"""

    layout: BankLayout
    assignor_code: DigitField
    our_number_segments: Tuple[DigitField, ...]


def _join(*fields) -> str:
    return "".join(str(field) for field in fields)


def _prepare_free_field(payee: Payee, document: DocumentReference, layout: BankLayout) -> _FreeFieldInputs:
    assignor = DigitField.of(payee.assignor_code, layout.assignor_code_width, "assignor_code")
    segments = tuple(
        DigitField.of(segment, width, "our_number")
        for segment, width in zip(split_our_number(document.our_number), (3, 3, 9))
    )
    return _FreeFieldInputs(layout=layout, assignor_code=assignor, our_number_segments=segments)


def _free_field(inputs: _FreeFieldInputs) -> str:
    """
    25-digit free field (barcode positions 19..43).

    Layout: assignor code (6) + assignor DV (1) + our-number[0:3] + billing type (1)
    + our-number[3:6] + issuer role (1) + our-number[6:15] + free-field DV (1)
    """
    assignor = str(inputs.assignor_code)
    seg1, seg2, seg3 = inputs.our_number_segments
    body = _join(
        assignor,
        modulo11(assignor),
        seg1,
        inputs.layout.billing_type,
        seg2,
        inputs.layout.issuer_role,
        seg3,
    )
    return body + modulo11(body)


def build_free_field(
    payee: Payee,
    document: DocumentReference,
    layout: BankLayout = CAIXA_SIGCB,
) -> str:
    """Free field for a payee and document reference, check digit included"""
    return _free_field(_prepare_free_field(payee, document, layout))


def _prepare_barcode(
    payment: Payment,
    payee: Payee,
    document: DocumentReference,
    layout: BankLayout,
    factor_mode: FactorMode,
) -> Tuple[DigitField, DigitField, _FreeFieldInputs]:
    """
    Validate every input and render the literal fields.

    Amount is checked first so an oversized amount is rejected before any
    other field is touched.
    """
    amount = DigitField.of(format_amount(payment.amount_cents), 10, "amount")
    factor = DigitField.of(format_due_date_factor(payment.due_date, factor_mode), 4, "due_date_factor")
    return factor, amount, _prepare_free_field(payee, document, layout)


def _assemble_barcode(factor: DigitField, amount: DigitField, inputs: _FreeFieldInputs) -> str:
    layout = inputs.layout
    payload = _join(layout.bank_id, layout.currency_code, factor, amount, _free_field(inputs))
    # General check digit sits at position 4 and covers the other 43 digits
    general = modulo11_no_zero(payload)
    return payload[:4] + general + payload[4:]


def build_barcode(
    payment: Payment,
    payee: Payee,
    document: DocumentReference,
    layout: BankLayout = CAIXA_SIGCB,
    factor_mode: FactorMode = "clamp",
) -> str:
    """
    Build the 44-digit barcode.

    Positions:
    - 0..2   bank id
    - 3      currency code
    - 4      general check digit (modulo-11, never 0)
    - 5..8   due-date factor
    - 9..18  amount in cents
    - 19..43 free field

    Raises:
        AmountTooLargeError: amount needs more than 10 digits
        InvalidAmountError: amount is negative or not an integer
        InvalidFieldError: assignor code or our-number is malformed
    """
    return _assemble_barcode(*_prepare_barcode(payment, payee, document, layout, factor_mode))


def _require_barcode(barcode: str) -> None:
    DigitField.of(barcode, BARCODE_LENGTH, "barcode")


def build_typeable_line(barcode: str) -> str:
    """
    Derive the 47-digit typeable line from a barcode.

    Groups:
    1. bank id + currency + barcode[19:24] + modulo-10 DV (10 digits)
    2. barcode[24:34] + modulo-10 DV (11 digits)
    3. barcode[34:44] + modulo-10 DV (11 digits)
    4. general check digit (1 digit)
    5. due-date factor + amount (14 digits)
    """
    _require_barcode(barcode)

    group1 = barcode[0:4] + barcode[19:24]
    group2 = barcode[24:34]
    group3 = barcode[34:44]

    return (
        group1 + modulo10(group1)
        + group2 + modulo10(group2)
        + group3 + modulo10(group3)
        + barcode[4]
        + barcode[5:19]
    )


def typeable_line_to_barcode(typeable_line: str) -> str:
    """
    Rebuild the barcode from a typeable line.

    Separators (dots and spaces) of the printed form are accepted.

    Raises:
        InvalidFieldError: line is not 47 digits
        CheckDigitMismatchError: a group's modulo-10 digit is wrong
    """
    if not isinstance(typeable_line, str):
        raise InvalidFieldError("typeable_line must be a digit string")
    line = typeable_line.replace(".", "").replace(" ", "")
    DigitField.of(line, TYPEABLE_LINE_LENGTH, "typeable_line")

    groups = [(line[0:9], line[9]), (line[10:20], line[20]), (line[21:31], line[31])]
    for index, (body, check_digit) in enumerate(groups, start=1):
        expected = modulo10(body)
        if expected != check_digit:
            raise CheckDigitMismatchError(index, expected, check_digit)

    group1, group2, group3 = (body for body, _ in groups)
    return group1[0:4] + line[32] + line[33:47] + group1[4:9] + group2 + group3


def format_typeable_line(typeable_line: str) -> str:
    """Printed form: AAAAA.AAAAA BBBBB.BBBBBB CCCCC.CCCCCC D EEEEEEEEEEEEEE"""
    DigitField.of(typeable_line, TYPEABLE_LINE_LENGTH, "typeable_line")
    line = typeable_line
    return (
        f"{line[0:5]}.{line[5:10]} "
        f"{line[10:15]}.{line[15:21]} "
        f"{line[21:26]}.{line[26:32]} "
        f"{line[32]} "
        f"{line[33:47]}"
    )


def encode_boleto(
    payment: Payment,
    payee: Payee,
    document: DocumentReference,
    layout: BankLayout = CAIXA_SIGCB,
    factor_mode: FactorMode = "clamp",
) -> Boleto:
    """
    Main entry point: validate inputs, then compute barcode and typeable line.

    Returns an immutable Boleto; nothing is computed if validation fails.
    """
    factor, amount, free_field_inputs = _prepare_barcode(payment, payee, document, layout, factor_mode)

    barcode = _assemble_barcode(factor, amount, free_field_inputs)
    typeable_line = build_typeable_line(barcode)

    logging.debug(
        "Boleto encoded",
        extra={
            "layout": layout.name,
            "due_date_factor": str(factor),
            "amount_cents": payment.amount_cents,
        },
    )

    return Boleto(
        payment=payment,
        payee=payee,
        document=document,
        layout=layout,
        barcode=barcode,
        typeable_line=typeable_line,
    )
