"""GlossaryService: term definitions."""

from __future__ import annotations

from dataclasses import asdict

from oopnotes.domain.glossary import GLOSSARY, lookup, suggest
from oopnotes.services.result import ServiceResult


class GlossaryService:
    """Needs no library: the glossary ships with the package."""

    def glossary(self, term: str | None = None) -> ServiceResult:
        op = "glossary"
        if term is None:
            items = [asdict(entry) for entry in GLOSSARY]
            return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})
        try:
            entry = lookup(term)
        except KeyError:
            suggestions = suggest(term)
            message = f"No glossary entry for {term!r}"
            if suggestions:
                message += f" (did you mean: {', '.join(suggestions)}?)"
            return ServiceResult.failure(
                op, "NOT_FOUND", message, detail={"term": term, "suggestions": suggestions}
            )
        return ServiceResult(ok=True, op=op, data={"items": [asdict(entry)], "count": 1})
