"""
Process facts reported by the health, metrics and info endpoints.

RuntimeInfo is captured once when the application is built and never
changes afterwards. Uptime and memory are read fresh on every call.
"""
import os
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from platform import python_version
from typing import Dict

import psutil

from devops_demo.core.config import Settings


def utc_now_iso() -> str:
    """Current UTC time as ``2024-01-31T12:00:00.000Z``."""
    return format_timestamp(datetime.now(timezone.utc))


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class RuntimeInfo:
    """Facts fixed for the lifetime of the process."""

    version: str
    build_time: str
    environment: str
    pid: int = field(default_factory=os.getpid)
    platform: str = sys.platform
    runtime_version: str = field(default_factory=python_version)
    started_at: float = field(default_factory=time.monotonic)

    @classmethod
    def capture(cls, settings: Settings) -> "RuntimeInfo":
        return cls(
            version=settings.APP_VERSION,
            build_time=utc_now_iso(),
            environment=settings.ENV,
        )

    def uptime_seconds(self) -> float:
        return max(0.0, time.monotonic() - self.started_at)


def memory_usage() -> Dict[str, int]:
    """Memory counters of the current process, in bytes."""
    info = psutil.Process().memory_info()
    return {
        "rss": int(info.rss),
        "vms": int(info.vms),
        # Only reported on Linux
        "shared": int(getattr(info, "shared", 0)),
    }
