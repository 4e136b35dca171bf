"""KSUID generation and inspection routes."""

from fastapi import APIRouter, HTTPException, Query

from codec.hexadecimal import HEX_LENGTH
from core.ksuid import Ksuid
from internal.logging import get_logger

router = APIRouter(prefix="/api/v1/ksuids", tags=["ksuids"])

# These will be set by app.py
_generator_config = None
_clock = None
_random_source = None


def init(generator_config, clock, random_source):
    """Initialize with generator limits and the time/random sources."""
    global _generator_config, _clock, _random_source
    _generator_config = generator_config
    _clock = clock
    _random_source = random_source


@router.get("")
async def generate(count: int = Query(None, ge=1)):
    """Generate one or more KSUIDs."""
    if count is None:
        count = _generator_config.default_count
    if count > _generator_config.max_count:
        raise HTTPException(
            status_code=400,
            detail=f"count must be at most {_generator_config.max_count}",
        )

    ksuids = [Ksuid.generate(clock=_clock, random_source=_random_source) for _ in range(count)]
    get_logger().debug("Generated ksuids", count=count)
    return {"ksuids": [str(ksuid) for ksuid in ksuids]}


@router.get("/{value}")
async def inspect(value: str):
    """Decode a Base62 or hex KSUID into its components."""
    if len(value) == HEX_LENGTH:
        ksuid = Ksuid.from_hex(value)
    else:
        ksuid = Ksuid.parse(value)
    return ksuid.to_dict()
