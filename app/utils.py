import datetime
import math
import re
from typing import Optional, Sequence

from app.errors import FormatError
from app.schemas.prismic import ContentBlock

WORDS_PER_MINUTE = 200

# date-fns pt-BR abbreviations, capitalized for display
PT_BR_MONTHS = (
    "Jan",
    "Fev",
    "Mar",
    "Abr",
    "Mai",
    "Jun",
    "Jul",
    "Ago",
    "Set",
    "Out",
    "Nov",
    "Dez",
)

_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def count_words(content: Sequence[ContentBlock]) -> int:
    """Count words by splitting on single spaces, headings included."""
    total = 0
    for block in content:
        total += len(block.heading.split(" "))
        for fragment in block.body:
            total += len(fragment.text.split(" "))
    return total


def estimate_minutes(content: Sequence[ContentBlock]) -> int:
    return math.ceil(count_words(content) / WORDS_PER_MINUTE)


def parse_timestamp(value: str) -> datetime.datetime:
    if not isinstance(value, str) or not value.strip():
        raise FormatError(f"Invalid publication date: {value!r}")

    normalized = _COMPACT_OFFSET.sub(r"\1:\2", value.strip())
    try:
        parsed = datetime.datetime.fromisoformat(normalized)
    except ValueError as e:
        raise FormatError(f"Invalid publication date: {value!r}") from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc)
    return parsed


def format_publication_date(value: Optional[str]) -> Optional[str]:
    """Render an ISO timestamp as "dd MMM yyyy" with pt-BR month names.

    A missing date stays missing; anything else that does not parse raises
    FormatError.
    """
    if value is None:
        return None
    parsed = parse_timestamp(value)
    return f"{parsed.day:02d} {PT_BR_MONTHS[parsed.month - 1]} {parsed.year:04d}"
