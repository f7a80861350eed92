"""
Response bodies of the reporting endpoints.

Fields are snake_case in Python and camelCase on the wire.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MemoryUsage(CamelModel):
    rss: int
    vms: int
    shared: int = 0


class HealthResponse(CamelModel):
    status: str = "healthy"
    timestamp: str
    version: str
    uptime_seconds: float
    memory: MemoryUsage
    pid: int


class ReadinessResponse(CamelModel):
    status: str = "ready"
    timestamp: str
    version: str


class MetricsResponse(CamelModel):
    version: str
    build_time: str
    uptime_seconds: float
    memory: MemoryUsage
    pid: int
    platform: str
    runtime_version: str
    environment_name: str


class InfoResponse(CamelModel):
    app: str
    version: str
    build_time: str
    message: str
    tech_stack: List[str]


class ErrorResponse(CamelModel):
    error: str
    timestamp: str
    path: Optional[str] = None
    details: Optional[str] = None
