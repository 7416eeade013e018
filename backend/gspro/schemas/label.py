"""
Pydantic schemas for QR code labels.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


QRKind = Literal["produto", "venda", "usuario"]
QRFormat = Literal["png", "svg"]


class QRCodeRequest(BaseModel):
    kind: QRKind = Field(default="produto", description="What the label identifies")
    value: str = Field(..., min_length=1, max_length=480, description="Text to encode")
    format: QRFormat = "png"


class QRCodeResponse(BaseModel):
    """QR label returned as JSON with the image base64-encoded."""
    payload: str
    kind: QRKind
    media_type: str
    image_base64: str
    generated_at: datetime
    title: Optional[str] = None
    subtitle: Optional[str] = None
