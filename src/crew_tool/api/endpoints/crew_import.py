"""Crew CSV import endpoints: validate, import, template and error downloads"""
import logging
from fastapi import APIRouter, Response

from src.crew_tool.api.deps import CrewManager, DbSession
from src.crew_tool.api.errors import ApiError
from src.crew_tool.schemas.crew_import import CrewImportRequest, ImportAction
from src.crew_tool.services.crew_import import (
    annotate_csv,
    import_crew_csv,
    validate_crew_csv,
)
from src.crew_tool.services.csv_export import (
    ERRORS_FILENAME,
    TEMPLATE_FILENAME,
    export_error_rows_csv,
    generate_csv_template,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/crew/import")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _resolve_action(request: CrewImportRequest) -> ImportAction:
    try:
        return ImportAction(request.action or ImportAction.VALIDATE.value)
    except ValueError:
        raise ApiError(f"Invalid action: {request.action}")


def _require_csv_content(request: CrewImportRequest) -> str:
    if not request.csv_content or not request.csv_content.strip():
        raise ApiError("CSV content is required")
    return request.csv_content


def _csv_download(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.options("")
def crew_import_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("")
def crew_import(request: CrewImportRequest, db: DbSession, caller: CrewManager):
    """
    Validate or import a crew CSV.
    action=validate annotates every row without side effects;
    action=import additionally provisions every valid row.
    """
    action = _resolve_action(request)
    csv_content = _require_csv_content(request)
    logger.info(f"Crew CSV {action.value} requested by account {caller.user_id} (company {caller.company_id})")

    try:
        if action == ImportAction.IMPORT:
            result = import_crew_csv(db=db, csv_content=csv_content, actor=caller)
        else:
            result = validate_crew_csv(db=db, csv_content=csv_content, company_id=caller.company_id)
    except ValueError as e:
        raise ApiError(str(e))
    except Exception as e:
        logger.exception(f"Crew CSV {action.value} failed")
        raise ApiError(str(e))

    return result.model_dump(by_alias=True, mode="json")


@router.get("/template")
def download_template(caller: CrewManager):
    return _csv_download(generate_csv_template(), TEMPLATE_FILENAME)


@router.post("/errors")
def download_error_rows(request: CrewImportRequest, db: DbSession, caller: CrewManager):
    """Invalid rows of the uploaded CSV, with their errors, for correction"""
    csv_content = _require_csv_content(request)
    try:
        results, _, _ = annotate_csv(db, csv_content, caller.company_id, ImportAction.VALIDATE)
    except ValueError as e:
        raise ApiError(str(e))
    except Exception as e:
        logger.exception("Crew CSV error export failed")
        raise ApiError(str(e))

    return _csv_download(export_error_rows_csv(results), ERRORS_FILENAME)
