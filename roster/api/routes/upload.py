"""CSV upload endpoint."""

from fastapi import APIRouter, File, UploadFile

from roster.api.dependencies import BulkImporterDep, SettingsDep
from roster.api.exceptions import InvalidUploadError, StorageUnavailableError
from roster.api.models.students import ImportResponse
from roster.db.errors import ValidationError
from roster.importer.models import ImportErrorCode
from roster.importer.uploads import stage_upload
from roster.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/upload", response_model=ImportResponse, status_code=201)
async def upload_students(
    importer: BulkImporterDep,
    settings: SettingsDep,
    file: UploadFile | None = File(default=None),
) -> ImportResponse:
    """Import students from a CSV upload.

    The document must start with the header
    `id,name,course,age,address,email,phone,gender`.

    Raises:
        InvalidUploadError: No file, bad header, or a malformed row
        StorageUnavailableError: The store failed mid-import
    """
    if file is None:
        raise InvalidUploadError("No file uploaded")

    logger.info("upload_request", filename=file.filename)

    try:
        path = await stage_upload(
            file,
            settings.imports.upload_dir,
            settings.imports.max_upload_bytes,
        )
    except ValidationError as e:
        raise InvalidUploadError(e.message) from e

    report = await importer.run(path)

    if report.succeeded:
        return ImportResponse(
            message="CSV data saved successfully",
            rows_imported=report.rows_committed,
        )

    if report.error_code is ImportErrorCode.STORAGE_UNAVAILABLE:
        raise StorageUnavailableError(
            "Error saving data",
            rows_committed=report.rows_committed,
        )
    raise InvalidUploadError(
        report.message or "Invalid CSV format",
        line=report.line,
        rows_committed=report.rows_committed,
    )
