from fastapi import APIRouter, Depends

from devops_demo.api.deps import READ_METHODS, get_runtime
from devops_demo.schemas.reports import HealthResponse, MetricsResponse, ReadinessResponse
from devops_demo.services.runtime import RuntimeInfo, memory_usage, utc_now_iso

router = APIRouter()


@router.api_route("/health", methods=READ_METHODS, response_model=HealthResponse)
async def health(runtime: RuntimeInfo = Depends(get_runtime)):
    return HealthResponse(
        timestamp=utc_now_iso(),
        version=runtime.version,
        uptime_seconds=runtime.uptime_seconds(),
        memory=memory_usage(),
        pid=runtime.pid,
    )


@router.api_route("/ready", methods=READ_METHODS, response_model=ReadinessResponse)
async def readiness(runtime: RuntimeInfo = Depends(get_runtime)):
    # Always ready: there are no downstream dependencies to check
    return ReadinessResponse(timestamp=utc_now_iso(), version=runtime.version)


@router.api_route("/metrics", methods=READ_METHODS, response_model=MetricsResponse)
async def metrics(runtime: RuntimeInfo = Depends(get_runtime)):
    return MetricsResponse(
        version=runtime.version,
        build_time=runtime.build_time,
        uptime_seconds=runtime.uptime_seconds(),
        memory=memory_usage(),
        pid=runtime.pid,
        platform=runtime.platform,
        runtime_version=runtime.runtime_version,
        environment_name=runtime.environment,
    )
