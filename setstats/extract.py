"""Per-document extraction: OCR text in, normalized song names out."""

import logging
from typing import NamedTuple

from setstats.classify import is_noise
from setstats.normalize import normalize
from setstats.rules import RULES, ExtractionRule, extract
from setstats.sanitize import sanitize

logger = logging.getLogger(__name__)


class Document(NamedTuple):
    """One OCR-transcribed setlist."""

    document_id: str
    text: str


class Candidate(NamedTuple):
    """An accepted, sanitized name and the document it came from."""

    text: str
    document_id: str


def split_lines(text: str) -> list[str]:
    """Split raw OCR text into lines, tolerating \\r\\n and bare \\r endings."""
    return text.splitlines()


def extract_candidates(
    document: Document, rules: tuple[ExtractionRule, ...] = RULES
) -> list[Candidate]:
    """
    Run every line of a document through classification, extraction and
    sanitization.

    Args:
        document: The document to process.
        rules: Ordered extraction rules.

    Returns:
        Sanitized candidates in line order. Empty if the document has no text.
    """
    if not document.text or not document.text.strip():
        logger.info("No text for %s, skipping", document.document_id)
        return []

    candidates = []
    for line in split_lines(document.text):
        if is_noise(line):
            continue
        raw = extract(line, rules)
        if raw is None:
            continue
        cleaned = sanitize(raw)
        if cleaned is None:
            logger.debug("Rejected candidate %r in %s", raw, document.document_id)
            continue
        candidates.append(Candidate(text=cleaned, document_id=document.document_id))
    return candidates


def extract_names(
    document: Document, rules: tuple[ExtractionRule, ...] = RULES
) -> list[str]:
    """Normalized song names for one document, one entry per occurrence."""
    names = [normalize(candidate.text) for candidate in extract_candidates(document, rules)]
    return [name for name in names if name]
