import logging
from fastapi import HTTPException, Response, status

from animelog.core.exceptions import BaseAppException, NOT_AUTHENTICATED
from animelog.core.interfaces import JikanError
from animelog.schemas.anime import ActionResult

logger = logging.getLogger(__name__)

def handle_exception(e: Exception) -> HTTPException:
    """Handle exceptions and convert to HTTPException"""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, BaseAppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    if isinstance(e, JikanError):
        logger.error(f"Catalog request failed: {e.message}")
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch anime catalog"
        )
    logger.exception("Unhandled error")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An internal server error occurred"
    )

def action_response(result: ActionResult, response: Response) -> ActionResult:
    """Set the HTTP status of a failed action; the body stays an ActionResult"""
    if not result.success:
        if result.error == NOT_AUTHENTICATED:
            response.status_code = status.HTTP_401_UNAUTHORIZED
        else:
            response.status_code = status.HTTP_400_BAD_REQUEST
    return result
