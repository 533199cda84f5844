from typing import Annotated, List, Optional

from fastapi import APIRouter, Query, Request
from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import OutputFormat, WithParams
from infrastructure.services import ResponderDep

router = APIRouter(tags=["Messages"])
limiter = get_limiter()


@router.get("/languages")
@limiter.limit("50/minute")
def list_languages(request: Request, responder: ResponderDep):
    """List the loaded languages and the current default language."""
    translator = responder.translator
    return responder.json(
        request,
        0,
        {
            "languages": sorted(translator.languages()),
            "default": translator.default_language,
            "count": translator.count(),
        },
    )


@router.get("/messages/{code}")
@limiter.limit("50/minute")
def get_message(
    request: Request,
    code: int,
    responder: ResponderDep,
    output_format: Annotated[OutputFormat, Query(alias="format")] = OutputFormat.JSON,
    params: Annotated[Optional[List[str]], Query()] = None,
):
    """Render the envelope for a message code.

    The language follows the ``lang`` header or the ``lang=`` token of the
    User-Agent; repeated ``params`` query values fill the message template.
    """
    payload = WithParams(params=tuple(params)) if params else None
    return responder.render(request, output_format.value, code, payload)
