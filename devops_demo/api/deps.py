from fastapi import Request

from devops_demo.services.runtime import RuntimeInfo


def get_runtime(request: Request) -> RuntimeInfo:
    """RuntimeInfo captured by create_app()."""
    return request.app.state.runtime


# Every GET route also answers HEAD
READ_METHODS = ["GET", "HEAD"]
