"""Maps failures escaping a handler to a 500 Response."""

import logging
import traceback

from kitty.http.request import Request
from kitty.http.response import Response

logger = logging.getLogger("kitty.server")


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Handle an unexpected exception as a 500 error.

    In debug mode the traceback is returned as the body.
    """
    logger.error("500 %s %s", request.method, request.path, exc_info=exc)

    if debug:
        body = "".join(traceback.format_exception(exc))
        return Response(body=body, status=500)

    return Response(body="Internal Server Error", status=500)
