"""
QR code labels for products, sales and users.

Payloads look like ``GSPRO:produto:<value>``; images are rendered with
error-correction level H so labels survive scuffs in the yard.
"""

import io
from dataclasses import dataclass
from datetime import datetime

import qrcode
import qrcode.constants
import qrcode.image.svg

from gspro.models.base import utc_now


QR_KINDS = ("produto", "venda", "usuario")
QR_FORMATS = ("png", "svg")
MAX_PAYLOAD_LENGTH = 512

MEDIA_TYPES = {
    "png": "image/png",
    "svg": "image/svg+xml",
}


@dataclass
class QRLabel:
    payload: str
    kind: str
    image: bytes
    media_type: str
    generated_at: datetime


def build_payload(kind: str, value: str, prefix: str = "GSPRO") -> str:
    """
    Compose the text encoded in a label.

    Values that already carry ``prefix:`` are used as-is so scanned
    labels can be re-printed unchanged.

    Raises:
        ValueError: Unknown kind, empty value, or payload too long
    """
    if kind not in QR_KINDS:
        raise ValueError(f"Tipo de QR inválido: {kind}. Use uma de: {', '.join(QR_KINDS)}")

    value = (value or "").strip()
    if not value:
        raise ValueError("O conteúdo do QR code não pode ser vazio")

    if value.startswith(f"{prefix}:"):
        payload = value
    else:
        payload = f"{prefix}:{kind}:{value}"

    if len(payload) > MAX_PAYLOAD_LENGTH:
        raise ValueError(f"Conteúdo do QR code excede {MAX_PAYLOAD_LENGTH} caracteres")
    return payload


def render(payload: str, fmt: str = "png", box_size: int = 10, border: int = 4) -> bytes:
    """Render ``payload`` as PNG or SVG bytes."""
    if fmt not in QR_FORMATS:
        raise ValueError(f"Formato inválido: {fmt}. Use png ou svg")

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_H,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    if fmt == "svg":
        img = qr.make_image(image_factory=qrcode.image.svg.SvgPathImage)
    else:
        img = qr.make_image(fill_color="black", back_color="white")

    buffer = io.BytesIO()
    img.save(buffer)
    return buffer.getvalue()


def make_label(
    kind: str,
    value: str,
    fmt: str = "png",
    prefix: str = "GSPRO",
    box_size: int = 10,
    border: int = 4,
) -> QRLabel:
    payload = build_payload(kind, value, prefix)
    return QRLabel(
        payload=payload,
        kind=kind,
        image=render(payload, fmt, box_size, border),
        media_type=MEDIA_TYPES[fmt],
        generated_at=utc_now(),
    )
