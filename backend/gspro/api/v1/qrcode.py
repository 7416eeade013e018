"""
QR code label endpoints.
"""

import base64
import logging

from fastapi import APIRouter, HTTPException, Query, Response

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession, http_error
from gspro.core.config import settings
from gspro.core.errors import DomainError
from gspro.repositories.product import ProductRepository
from gspro.schemas.label import QRCodeRequest, QRCodeResponse, QRFormat
from gspro.services.qr import QRLabel, make_label

logger = logging.getLogger(__name__)

router = APIRouter(tags=["qrcode"])


def _make_label(kind: str, value: str, fmt: str) -> QRLabel:
    try:
        return make_label(
            kind,
            value,
            fmt,
            prefix=settings.qr_prefix,
            box_size=settings.qr_box_size,
            border=settings.qr_border,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


def _to_response(label: QRLabel, title=None, subtitle=None) -> QRCodeResponse:
    return QRCodeResponse(
        payload=label.payload,
        kind=label.kind,
        media_type=label.media_type,
        image_base64=base64.b64encode(label.image).decode("ascii"),
        generated_at=label.generated_at,
        title=title,
        subtitle=subtitle,
    )


@router.post(
    "/qrcode",
    response_model=QRCodeResponse,
    summary="Generate a QR code",
    description="Encode a product, sale or user reference; the image is returned base64-encoded.",
)
async def generate_qrcode(
    request: QRCodeRequest,
    current_user: CurrentActiveUser,
) -> QRCodeResponse:
    label = _make_label(request.kind, request.value, request.format)
    logger.info("QR code generated", extra={"kind": label.kind, "format": request.format})
    return _to_response(label)


@router.post(
    "/qrcode/image",
    summary="Generate a QR code image",
    description="Same as /qrcode but answers with the raw PNG or SVG for download.",
    response_class=Response,
)
async def generate_qrcode_image(
    request: QRCodeRequest,
    current_user: CurrentActiveUser,
) -> Response:
    label = _make_label(request.kind, request.value, request.format)
    filename = f"qrcode-{label.kind}.{request.format}"
    return Response(
        content=label.image,
        media_type=label.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/products/{product_id}/label",
    response_model=QRCodeResponse,
    summary="Product label",
    description="QR label for a product, titled with its name and SKU.",
)
async def product_label(
    product_id: str,
    db: DatabaseSession,
    current_user: CurrentActiveUser,
    format: QRFormat = Query(default="png"),
) -> QRCodeResponse:
    try:
        product = await ProductRepository(db).get_or_raise(product_id)
    except DomainError as exc:
        raise http_error(exc)

    label = _make_label("produto", product.id, format)
    return _to_response(label, title=product.name, subtitle=product.sku)
