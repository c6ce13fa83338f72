"""CSV bulk import pipeline."""

from roster.importer.models import ImportErrorCode, ImportReport
from roster.importer.pipeline import BulkImporter
from roster.importer.uploads import stage_upload, temporary_upload

__all__ = [
    "BulkImporter",
    "ImportErrorCode",
    "ImportReport",
    "stage_upload",
    "temporary_upload",
]
