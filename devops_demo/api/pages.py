from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from devops_demo.api.deps import READ_METHODS, get_runtime
from devops_demo.services.runtime import RuntimeInfo
from devops_demo.templates.landing import render_landing_page

router = APIRouter()


@router.api_route("/", methods=READ_METHODS, response_class=HTMLResponse)
async def landing_page(runtime: RuntimeInfo = Depends(get_runtime)):
    return HTMLResponse(render_landing_page(runtime))
