"""Order confirmation e-mails."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_order_email_service
from application.dtos.orders import OrderEmailsResult, SendOrderEmails
from application.services.order_email_service import OrderEmailService
from domain.common.exceptions import OrderDataMissingException


router = APIRouter(tags=["Orders"])


@router.post("/send-order-emails", response_model=OrderEmailsResult, response_model_by_alias=True)
async def send_order_emails(
    req: Optional[SendOrderEmails] = Body(None),
    service: OrderEmailService = Depends(get_order_email_service),
):
    if req is None or req.order_data is None:
        raise OrderDataMissingException()
    return await service.send_order_emails(req.order_data)
