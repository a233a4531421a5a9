"""Run-level orchestration: extract every document and reduce into one report."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from setstats.aggregate import AggregatorState, StatisticsReport
from setstats.extract import Document, extract_names

logger = logging.getLogger(__name__)


def document_state(document: Document, dedupe_per_document: bool = False) -> AggregatorState:
    """Partial counts for a single document."""
    names = extract_names(document)
    if dedupe_per_document:
        names = list(dict.fromkeys(names))
    logger.debug("%s: %d names", document.document_id, len(names))
    return AggregatorState().update(names)


def analyze(
    documents: Sequence[Document],
    total_documents: int | None = None,
    workers: int = 1,
    dedupe_per_document: bool = False,
) -> StatisticsReport:
    """
    Build the ranked statistics for a set of documents.

    Each document produces its own partial count map; the partials are merged
    in submission order once all documents are done, so the result does not
    depend on the number of workers.

    Args:
        documents: Documents to analyze.
        total_documents: Denominator for percentages. Defaults to the number of
            documents.
        workers: Number of threads to extract with. 1 runs inline.
        dedupe_per_document: Count a name at most once per document.

    Returns:
        The StatisticsReport for the run.
    """
    if total_documents is None:
        total_documents = len(documents)
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if workers == 1 or len(documents) <= 1:
        partials = [document_state(doc, dedupe_per_document) for doc in documents]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            partials = list(
                executor.map(lambda doc: document_state(doc, dedupe_per_document), documents)
            )

    state = AggregatorState()
    for partial in partials:
        state.merge(partial)

    logger.info(
        "Analyzed %d documents: %d unique names, %d occurrences",
        len(documents),
        len(state),
        sum(state.counts.values()),
    )
    return state.report(total_documents)
