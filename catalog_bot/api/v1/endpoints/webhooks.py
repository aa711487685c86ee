"""Shopify webhook receiver. Deliveries are acknowledged and otherwise ignored."""

import logging

from fastapi import APIRouter, Request, Response, status

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/webhooks/products/update")
async def receive_product_update(request: Request):
    topic = request.headers.get("X-Shopify-Topic", "")
    logger.debug(f"Webhook received: topic={topic}")
    return Response(status_code=status.HTTP_200_OK)
