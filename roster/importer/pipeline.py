"""Bulk import of student records from an uploaded CSV document.

The document is read lazily, row by row. The header must match
`id,name,course,age,address,email,phone,gender` exactly. Each data row
must carry all eight values.

Two commit modes:
- partial (default): rows are written one at a time in document order.
  A bad row stops the import and rows before it stay committed.
- atomic: the whole batch is validated first and written in a single
  transaction, so a bad row commits nothing.

Either way the staged upload file is deleted before run() returns.
"""

import csv
import time
from collections.abc import Iterator
from contextlib import closing
from pathlib import Path

from roster.db.errors import StorageUnavailable, ValidationError
from roster.importer.models import ImportErrorCode, ImportReport
from roster.importer.reader import Row, read_rows
from roster.importer.uploads import temporary_upload
from roster.observability.logging import get_logger
from roster.observability.metrics import IMPORT_DURATION, IMPORT_ROWS, IMPORT_RUNS
from roster.students.store import StudentStore
from roster.students.validation import validate_header, validate_row

logger = get_logger(__name__)


class BulkImporter:
    """Validates a CSV upload and commits its rows through a StudentStore."""

    def __init__(self, store: StudentStore, *, atomic: bool = False) -> None:
        self._store = store
        self._atomic = atomic

    async def run(self, path: Path) -> ImportReport:
        """Import a staged upload and delete it.

        Validation, parse and storage failures are reported in the
        returned ImportReport rather than raised.
        """
        start = time.perf_counter()
        logger.info("import_started", path=str(path), atomic=self._atomic)

        with temporary_upload(path):
            report = await self._import(path)

        duration = time.perf_counter() - start
        IMPORT_DURATION.observe(duration)
        IMPORT_RUNS.labels(result="success" if report.succeeded else "failure").inc()

        if report.succeeded:
            logger.info(
                "import_completed",
                rows_committed=report.rows_committed,
                duration_ms=round(duration * 1000, 2),
            )
        else:
            logger.warning(
                "import_failed",
                error_code=report.error_code.value if report.error_code else None,
                message=report.message,
                line=report.line,
                rows_read=report.rows_read,
                rows_committed=report.rows_committed,
                duration_ms=round(duration * 1000, 2),
            )
        return report

    async def _import(self, path: Path) -> ImportReport:
        report = ImportReport()

        with closing(read_rows(path)) as rows:
            try:
                header = next(rows, None)
                if header is None:
                    return report
                report.line = header.line
                validate_header(header.values)
            except ValidationError as e:
                return report.fail(ImportErrorCode.INVALID_FORMAT, e.message)
            except (csv.Error, UnicodeDecodeError) as e:
                return report.fail(ImportErrorCode.INVALID_FORMAT, f"Invalid CSV format: {e}")

            try:
                if self._atomic:
                    await self._commit_batch(rows, report)
                else:
                    await self._commit_each(rows, report)
            except ValidationError as e:
                IMPORT_ROWS.labels(outcome="rejected").inc()
                return report.fail(ImportErrorCode.INVALID_ROW, e.message)
            except (csv.Error, UnicodeDecodeError) as e:
                return report.fail(ImportErrorCode.INVALID_FORMAT, f"Invalid CSV format: {e}")
            except StorageUnavailable as e:
                return report.fail(ImportErrorCode.STORAGE_UNAVAILABLE, e.message)

        report.line = None
        return report

    async def _commit_each(self, rows: Iterator[Row], report: ImportReport) -> None:
        """Write rows one at a time, in document order."""
        for row in rows:
            report.rows_read += 1
            report.line = row.line
            student_id, fields = validate_row(row.values, row.line)
            await self._store.create_or_replace_fields(student_id, fields)
            report.rows_committed += 1
            IMPORT_ROWS.labels(outcome="committed").inc()

    async def _commit_batch(self, rows: Iterator[Row], report: ImportReport) -> None:
        """Validate every row, then write them all in one transaction."""
        batch = []
        for row in rows:
            report.rows_read += 1
            report.line = row.line
            batch.append(validate_row(row.values, row.line))

        report.line = None
        report.rows_committed = await self._store.create_many(batch)
        IMPORT_ROWS.labels(outcome="committed").inc(report.rows_committed)
