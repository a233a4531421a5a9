"""Turning setlist photos, PDFs and transcripts into Documents."""

import logging
import shutil
import sys
from pathlib import Path
from typing import Iterable

import pdfplumber
import pytesseract
from pdf2image import convert_from_path
from PIL import Image, ImageEnhance, ImageFilter, ImageOps

from setstats.config import OcrSettings, Settings
from setstats.extract import Document

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


def check_tesseract_installation() -> bool:
    """Warn on stderr if the tesseract binary is missing; return whether it was found."""
    if shutil.which("tesseract"):
        return True
    if sys.platform == "darwin":
        platform_instructions = ": `brew install tesseract tesseract-lang`"
    elif sys.platform == "linux":
        platform_instructions = ": `apt-get install tesseract-ocr tesseract-ocr-jpn`"
    else:
        platform_instructions = ""
    print(
        "WARNING: tesseract not found."
        + f"\n    Please install tesseract{platform_instructions}."
        + "\n    Photos and scanned PDFs will be treated as empty.\n",
        file=sys.stderr,
    )
    return False


def _preprocess_image(image: Image.Image) -> Image.Image:
    gray = image.convert("L")
    gray = ImageOps.autocontrast(gray)
    gray = ImageEnhance.Contrast(gray).enhance(2.0)
    gray = gray.filter(ImageFilter.MedianFilter(size=3))
    gray = ImageEnhance.Sharpness(gray).enhance(2.0)
    return gray


def ocr_image(image: Image.Image, ocr: OcrSettings) -> str:
    """Run tesseract over an already-loaded image."""
    if ocr.preprocess:
        image = _preprocess_image(image)
    return pytesseract.image_to_string(image, lang=ocr.lang, config=f"--psm {ocr.psm}")


def read_image(path: Path, ocr: OcrSettings) -> str:
    with Image.open(path) as image:
        # EXIF rotation matters for phone photos of printed setlists
        image = ImageOps.exif_transpose(image)
        return ocr_image(image, ocr)


def read_pdf(path: Path, ocr: OcrSettings) -> str:
    """
    Text of every page of a PDF, one page after another.

    Pages with an embedded text layer are read directly; pages without one are
    rasterised and OCR'd.
    """
    pages: list[str] = []
    with pdfplumber.open(str(path)) as pdf:
        for page_num, page in enumerate(pdf.pages):
            text = page.extract_text() or ""
            if not text.strip():
                images = convert_from_path(
                    str(path),
                    first_page=page_num + 1,
                    last_page=page_num + 1,
                    dpi=ocr.dpi,
                )
                text = "\n".join(ocr_image(image, ocr) for image in images)
            pages.append(text)
    return "\n".join(pages)


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def is_supported(path: Path, settings: Settings) -> bool:
    suffix = path.suffix.lower()
    return (
        suffix == PDF_SUFFIX
        or suffix in settings.text_suffixes
        or suffix in settings.image_suffixes
    )


def collect_paths(inputs: Iterable[Path], settings: Settings) -> list[Path]:
    """
    Expand the given files and directories into the list of sources to read.

    Directories are scanned one level deep, in name order. Files with an
    unsupported suffix are skipped.

    Raises:
        FileNotFoundError: If an input does not exist.
    """
    paths: list[Path] = []
    for entry in inputs:
        if not entry.exists():
            raise FileNotFoundError(f"Input not found: {entry}")
        if entry.is_dir():
            children = sorted(child for child in entry.iterdir() if child.is_file())
            paths.extend(child for child in children if is_supported(child, settings))
        elif is_supported(entry, settings):
            paths.append(entry)
        else:
            logger.warning("Skipping unsupported file %s", entry)
    return paths


def transcribe(path: Path, settings: Settings) -> str:
    """
    Raw text for a single source file.

    Raises:
        ValueError: If the suffix is not a supported source type.
    """
    suffix = path.suffix.lower()
    if suffix in settings.text_suffixes:
        return read_text(path)
    if suffix == PDF_SUFFIX:
        return read_pdf(path, settings.ocr)
    if suffix in settings.image_suffixes:
        return read_image(path, settings.ocr)
    raise ValueError(f"Unsupported source type: {path}")


def load_document(path: Path, settings: Settings) -> Document:
    """
    Read one source into a Document.

    OCR and PDF failures do not abort the run: they are logged and the
    document comes back with empty text.
    """
    if not path.exists():
        raise FileNotFoundError(f"Input not found: {path}")
    if not is_supported(path, settings):
        raise ValueError(f"Unsupported source type: {path}")
    try:
        text = transcribe(path, settings)
    except Exception as e:
        logger.warning("Text extraction failed for %s: %s", path, e)
        text = ""
    return Document(document_id=path.name, text=text)


def needs_ocr(paths: Iterable[Path], settings: Settings) -> bool:
    """Whether any of the paths may have to go through tesseract."""
    return any(path.suffix.lower() not in settings.text_suffixes for path in paths)
