from fastapi import APIRouter, Depends

from devops_demo.api.deps import READ_METHODS, get_runtime
from devops_demo.schemas.reports import InfoResponse
from devops_demo.services.runtime import RuntimeInfo

router = APIRouter(prefix="/api")

APP_TITLE = "DevOps Demo"
WELCOME_MESSAGE = "Hello from Python API!"
TECH_STACK = (
    "Python",
    "FastAPI",
    "Docker",
    "Kubernetes",
    "Jenkins",
    "ArgoCD",
)


@router.api_route("/info", methods=READ_METHODS, response_model=InfoResponse)
async def info(runtime: RuntimeInfo = Depends(get_runtime)):
    return InfoResponse(
        app=APP_TITLE,
        version=runtime.version,
        build_time=runtime.build_time,
        message=WELCOME_MESSAGE,
        tech_stack=list(TECH_STACK),
    )
