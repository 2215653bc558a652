"""Single Responsibility: each class has one reason to change.

The "before" version of ``Report`` would compute, format and save
itself. Here the data, the formatting and the storage live in three
classes that change for three different reasons.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Report:
    title: str
    lines: list[str] = field(default_factory=list)

    def add_line(self, line: str) -> None:
        self.lines.append(line)


class ReportFormatter:
    def to_text(self, report: Report) -> str:
        body = "\n".join(f"- {line}" for line in report.lines)
        return f"{report.title}\n{body}"


class ReportRepository:
    """In-memory storage; a file or database version would share the interface."""

    def __init__(self) -> None:
        self._saved: dict[str, str] = {}

    def save(self, name: str, content: str) -> None:
        self._saved[name] = content

    def load(self, name: str) -> str:
        return self._saved[name]

    def __len__(self) -> int:
        return len(self._saved)


def demo() -> None:
    report = Report("Quarterly sales")
    report.add_line("Revenue up 12%")
    report.add_line("Churn down 3%")

    text = ReportFormatter().to_text(report)
    print(text)

    repository = ReportRepository()
    repository.save("q3", text)
    print(f"Saved reports: {len(repository)}")
