# ABOUTME: Reduces a resolved BookRecord plus the row's own fields into an output row.
# ABOUTME: Defines the fixed 10-column output header and the "N/A" placeholder.

from bookenrich.metadata.types import BookRecord, InputRow, OutputRow

PLACEHOLDER = "N/A"

OUTPUT_HEADER = (
    "ISBN",
    "author name",
    "book name",
    "book condition",
    "date of publication",
    "series",
    "page count",
    "language",
    "tags",
    "image links",
)


def reduce_record(row: InputRow, record: BookRecord | None) -> OutputRow:
    """Project a resolved record onto the output row shape.

    With no record, the row's own ISBN, author, title and condition are kept
    verbatim and every fetched column becomes PLACEHOLDER. With a record, its
    empty fields stay empty strings; PLACEHOLDER only marks a row nothing was
    found for. No provider supplies series data, so series is always
    PLACEHOLDER.
    """
    if record is None:
        return OutputRow(
            isbn=row.isbn,
            author=row.author,
            title=row.title,
            condition=row.condition,
            published_date=PLACEHOLDER,
            series=PLACEHOLDER,
            page_count=PLACEHOLDER,
            language=PLACEHOLDER,
            tags=PLACEHOLDER,
            image_link=PLACEHOLDER,
        )

    return OutputRow(
        isbn=row.isbn,
        author=", ".join(record.author_names),
        title=record.title,
        condition=row.condition,
        published_date=record.published_date,
        series=PLACEHOLDER,
        page_count=str(record.page_count),
        language=record.language,
        tags=", ".join(record.subject_names),
        image_link=record.thumbnail_url,
    )
