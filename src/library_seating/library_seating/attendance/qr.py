from __future__ import annotations

import io
from typing import BinaryIO, Optional

import qrcode
from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ValidationError


def render_member_qr(member_id: int) -> io.BytesIO:
    """PNG of the member's pass; the QR payload is the bare member id."""

    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(str(int(member_id)))
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf


def decode_qr_image(stream: BinaryIO) -> Optional[str]:
    """First QR payload found in an uploaded photo, or None."""

    try:
        img = Image.open(stream).convert("RGB")
    except UnidentifiedImageError:
        raise ValidationError("Uploaded file is not an image")

    # pyzbar loads the native zbar library on import.
    from pyzbar.pyzbar import decode as pyzbar_decode

    decoded = pyzbar_decode(img)
    if not decoded:
        return None
    return decoded[0].data.decode("utf-8").strip()


def parse_member_code(code) -> Optional[int]:
    """Member id carried by a scanned code; None when it is not a number."""

    text = str(code or "").strip()
    if not text.isdecimal():
        return None
    return int(text)
