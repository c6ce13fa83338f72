"""Bulk import configuration models."""

from pathlib import Path

from pydantic import BaseModel, Field


class ImportConfig(BaseModel):
    """Settings for the CSV upload pipeline."""

    upload_dir: Path = Field(
        default=Path("uploads"),
        description="Directory where uploaded files are staged before import",
    )
    atomic: bool = Field(
        default=False,
        description=(
            "Validate the whole batch before writing and commit it in one "
            "transaction. When false, rows before a malformed row stay committed."
        ),
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest accepted upload in bytes",
    )
