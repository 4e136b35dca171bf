import asyncio
import time
from enum import Enum

from codec import base62
from core.ksuid import Ksuid, PAYLOAD_LENGTH
from utils.timestamp import KSUID_EPOCH, MAX_KSUID_SECONDS, format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

class HealthChecker:
    def __init__(self, ttl=1.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._start_time = time.time()

    @property
    def uptime(self):
        return time.time() - self._start_time

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=5)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

# Checks
def create_random_check(random_source):
    async def check():
        sample = random_source.read(PAYLOAD_LENGTH)
        if len(sample) != PAYLOAD_LENGTH:
            return CheckResult("random", Status.FAIL, f"{len(sample)}/{PAYLOAD_LENGTH}B")
        return CheckResult("random", Status.OK)
    return check

def create_clock_check(clock):
    async def check():
        seconds = clock.now() - KSUID_EPOCH

        # Generation still works here, but timestamps saturate
        if seconds < 0:
            return CheckResult("clock", Status.DEGRADED, "before_epoch")
        if seconds > MAX_KSUID_SECONDS:
            return CheckResult("clock", Status.DEGRADED, "past_range")

        return CheckResult("clock", Status.OK, f"t{int(seconds)}")
    return check

async def check_codec():
    for ksuid in (Ksuid.MIN, Ksuid.MAX):
        text = ksuid.to_base62()
        if len(text) != base62.ENCODED_LENGTH or Ksuid.parse(text) != ksuid:
            return CheckResult("codec", Status.FAIL, f"roundtrip {text}")
    if Ksuid.MAX.to_base62() != base62.MAX_ENCODED:
        return CheckResult("codec", Status.FAIL, "max")
    return CheckResult("codec", Status.OK)
