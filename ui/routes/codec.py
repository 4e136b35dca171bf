"""Raw Base62 conversion routes, without the identifier wrapper."""

from fastapi import APIRouter, Query

from codec import base62
from codec.hexadecimal import decode_hex, encode_hex

router = APIRouter(prefix="/api/v1/codec", tags=["codec"])


@router.get("/base62/encode")
async def encode(hex: str = Query(...)):
    """Encode 20 hex-encoded bytes as Base62."""
    return {"base62": base62.encode(decode_hex(hex))}


@router.get("/base62/decode")
async def decode(value: str = Query(...)):
    """Decode a Base62 string to 20 hex-encoded bytes."""
    return {"hex": encode_hex(base62.decode(value))}
