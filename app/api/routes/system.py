from fastapi import APIRouter, Request
from api.dependencies.rate_limits import get_limiter
from infrastructure.services import ResponderDep, SettingsDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer health checks poll these endpoints; keep the limit generous.
@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request, responder: ResponderDep, settings: SettingsDep):
    """Get the version of the application."""
    return responder.json(request, 0, {"version": settings.GIT_SHA})


@router.get("/health")
@limiter.limit("50/minute")
def get_health(request: Request, responder: ResponderDep):
    """Healthcheck endpoint."""
    return responder.json(request, 0, {"status": "ok"})
