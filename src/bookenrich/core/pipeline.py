# ABOUTME: Row-by-row enrichment driver.
# ABOUTME: Resolves and reduces each input row in order, producing one output row per input row.

import logging
from collections.abc import Callable, Iterable

from bookenrich.core.reducer import reduce_record
from bookenrich.core.resolver import FallbackResolver, ResolvedRecord
from bookenrich.metadata.types import InputRow, OutputRow

logger = logging.getLogger(__name__)

RowCallback = Callable[[int, InputRow, ResolvedRecord | None], None]


def run_pipeline(
    rows: Iterable[InputRow],
    resolver: FallbackResolver,
    on_row: RowCallback | None = None,
) -> list[OutputRow]:
    """Enrich rows sequentially, preserving input order.

    Provider failures are absorbed by the resolver, so a row with bad or
    unknown data still yields a (placeholder) output row and never stops the
    run. There is no reordering and no deduplication.

    Args:
        rows: Input rows in table order.
        resolver: The fallback chain used for each row.
        on_row: Optional callback invoked after each row with its index,
            the input row, and the resolved record (None if unresolved).

    Returns:
        One OutputRow per input row, in the same order.
    """
    output: list[OutputRow] = []
    for index, row in enumerate(rows):
        resolved = resolver.resolve_with_source(row)
        record = resolved.record if resolved is not None else None
        output.append(reduce_record(row, record))
        if on_row is not None:
            on_row(index, row, resolved)

    logger.info("Enriched %d row(s)", len(output))
    return output
