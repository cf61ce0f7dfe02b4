"""Boleto endpoints - encode a slip, decode a typeable line"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from boleto_gateway.api.v1.schemas import BoletoRequest, BoletoResponse, BarcodeResponse
from boleto_gateway.api.dependencies import get_factor_mode, get_layout, get_request_id
from boleto_gateway.domain.barcode import encode_boleto, format_typeable_line, typeable_line_to_barcode
from boleto_gateway.domain.exceptions import BoletoError
from boleto_gateway.domain.fields import FactorMode, is_due_date_factor_clamped
from boleto_gateway.domain.models import BankLayout, DocumentReference, Payee, Payment
from boleto_gateway.infrastructure.observability.metrics import record_boleto, record_rejection
from boleto_gateway.infrastructure.observability.logging import log_boleto_encoded

router = APIRouter()


@router.post("/boleto", response_model=BoletoResponse)
def create_boleto(
    request_body: BoletoRequest,
    request: Request,
    layout: BankLayout = Depends(get_layout),
    factor_mode: FactorMode = Depends(get_factor_mode),
):
    """
    Encode barcode and typeable line for a payment slip.

    Domain validation failures (oversized amount, malformed assignor code or
    our-number) are reported as 422.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        boleto = encode_boleto(
            Payment(due_date=request_body.due_date, amount_cents=request_body.amount_cents),
            Payee(assignor_code=request_body.assignor_code),
            DocumentReference(our_number=request_body.our_number),
            layout=layout,
            factor_mode=factor_mode,
        )
    except BoletoError as e:
        record_rejection("encode", e)
        logging.warning(f"Boleto rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_boleto(layout.name, is_due_date_factor_clamped(boleto.payment.due_date, factor_mode))
    log_boleto_encoded(request_id, layout.name, boleto.due_date_factor, request_body.amount_cents, duration_ms)

    return BoletoResponse(
        barcode=boleto.barcode,
        typeable_line=boleto.typeable_line,
        formatted_typeable_line=format_typeable_line(boleto.typeable_line),
        due_date_factor=boleto.due_date_factor,
        valid=boleto.is_valid,
    )


@router.get("/boleto/{typeable_line}/barcode", response_model=BarcodeResponse)
def decode_typeable_line(typeable_line: str, request: Request):
    """Rebuild the barcode from a typeable line, verifying its group check digits"""
    request_id = get_request_id(request)

    try:
        barcode = typeable_line_to_barcode(typeable_line)
    except BoletoError as e:
        record_rejection("decode", e)
        logging.warning(f"Typeable line rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return BarcodeResponse(typeable_line=typeable_line, barcode=barcode)
