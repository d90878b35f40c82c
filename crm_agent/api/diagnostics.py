"""Database diagnostic routes.

Development scaffolding: mounted only when `enable_diagnostic_routes` is set.
"""

from fastapi import APIRouter

from ..config import settings
from ..db.admin import get_admin_client
from ..db.repositories.account import AccountRepository
from ..models.envelope import ErrorResponse
from ..models.diagnostics import AccountLookupResponse
from ..utils.logger import get_logger
from .responses import envelope_response

router = APIRouter(prefix="/api", tags=["Diagnostics"])


@router.get(
    "/test-db",
    response_model=AccountLookupResponse,
    responses={500: {"model": ErrorResponse}}
)
def check_database():
    """
    Check database connectivity by fetching the test account.

    Runs in the threadpool; the Supabase client is synchronous.

    Returns:
        The single account matching the diagnostic location ID
    """
    logger = get_logger("api.diagnostics")
    try:
        repo = AccountRepository(get_admin_client())

        logger.info("Testing database connection...")
        result = repo.fetch_by_location_id(settings.diagnostic_location_id)

        if not result.ok:
            logger.error(f"Database error: {result.error.message} ({result.error.details})")
            return envelope_response(
                ErrorResponse(error=result.error.message, details=result.error.details),
                status_code=500
            )

        logger.info(f"Account found: {result.data}")
        return envelope_response(AccountLookupResponse(account=result.data))

    except Exception as e:
        logger.exception(f"Database connectivity check failed: {e}")
        return envelope_response(
            ErrorResponse(error=str(e)),
            status_code=500,
            exclude_none=True
        )
