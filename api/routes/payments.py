"""
Payments API routes.

Thin handlers over PaymentService: no SDK details here. The webhook reads the
raw body, since the signature covers the exact bytes sent.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request

from api.dependencies import get_payment_service
from application.dtos.payments import CreatePaymentIntent, PaymentIntentCreated, WebhookAck
from application.services.payment_service import PaymentService
from core.settings import payment_settings


router = APIRouter(tags=["Payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentCreated, response_model_by_alias=True)
async def create_payment_intent(
    req: Optional[CreatePaymentIntent] = Body(None),
    service: PaymentService = Depends(get_payment_service),
):
    # an empty body is an absent amount, reported as InvalidAmount
    return await service.create_payment_intent(req or CreatePaymentIntent())


@router.post("/webhook", response_model=WebhookAck)
async def payment_webhook(
    request: Request,
    service: PaymentService = Depends(get_payment_service),
):
    raw_body = await request.body()
    signature = request.headers.get(payment_settings.webhook.signature_header)
    return await service.handle_webhook(raw_body, signature)
