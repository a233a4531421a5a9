"""Run configuration, optionally loaded from a YAML file."""

from pathlib import Path
from typing import List, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

ExportFormat = Literal["csv", "json", "text"]


class OcrSettings(BaseModel):
    """Options passed to tesseract when a source has to be OCR'd."""

    model_config = ConfigDict(extra="forbid")

    lang: str = "jpn+eng"
    psm: int = Field(default=6, ge=0, le=13)  # tesseract page segmentation mode
    dpi: PositiveInt = 300  # rasterisation of PDF pages without a text layer
    preprocess: bool = True


class Settings(BaseModel):
    """Everything a run needs besides its input paths."""

    model_config = ConfigDict(extra="forbid")

    workers: PositiveInt = 1
    dedupe_per_document: bool = False
    count_empty_documents: bool = True
    top_n: PositiveInt = 10
    threshold: float = Field(default=50.0, ge=0, le=100)
    formats: List[ExportFormat] = Field(default_factory=lambda: ["csv", "json", "text"])
    text_suffixes: List[str] = Field(default_factory=lambda: [".txt"])
    image_suffixes: List[str] = Field(
        default_factory=lambda: [".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"]
    )
    ocr: OcrSettings = Field(default_factory=OcrSettings)


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from a YAML file, or return the defaults.

    Args:
        path: YAML file with a mapping of Settings fields. None means defaults.

    Returns:
        The validated Settings.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If the file is not valid YAML or fails validation.
    """
    if path is None:
        return Settings()
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            raw_data = yaml.safe_load(file.read())
    except yaml.YAMLError as e:
        error_msg = f"YAML parsing error in {path}"
        problem_mark = getattr(e, "problem_mark", None)
        if problem_mark is not None:
            error_msg += f" at line {problem_mark.line + 1}, column {problem_mark.column + 1}"
        error_msg += f": {e}"
        raise ValueError(error_msg) from e

    # An empty file is a valid, all-defaults config
    if raw_data is None:
        raw_data = {}

    try:
        return Settings.model_validate(raw_data)
    except ValidationError as e:
        raise ValueError(f"Validation error in {path}:\n{e}") from e
