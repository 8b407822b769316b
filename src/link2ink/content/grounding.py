"""Citation collection from search-grounded responses."""

from __future__ import annotations

from typing import Iterable, Mapping

from ..constants import DEFAULT_CITATION_TITLE
from .models import Citation


def collect_citations(
    references: Iterable[Mapping[str, str | None]],
    fallback_title: str = DEFAULT_CITATION_TITLE,
) -> list[Citation]:
    """Deduplicate references by URI, keeping first-seen order and title.

    Records without a URI are skipped.
    """
    seen: dict[str, Citation] = {}
    for ref in references:
        uri = (ref.get("uri") or "").strip()
        if not uri or uri in seen:
            continue
        title = (ref.get("title") or "").strip() or fallback_title
        seen[uri] = Citation(uri=uri, title=title)
    return list(seen.values())
