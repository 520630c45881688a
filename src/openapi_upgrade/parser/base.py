"""Data models shared by the converter, the validator and the CLI."""

from typing import Literal

from pydantic import BaseModel


class ConversionIssue(BaseModel):
    """A non-fatal problem found while validating a document."""

    stage: Literal["input", "output"]
    location: str  # dotted path into the document, e.g. paths./users.get.responses
    message: str

    def __str__(self) -> str:
        if self.location:
            return f"{self.stage.upper()} {self.location}: {self.message}"
        return f"{self.stage.upper()}: {self.message}"


class ConversionResult(BaseModel):
    """Outcome of one conversion run."""

    document: dict
    source_version: str  # swagger-2.0 / openapi-3.0 / openapi-3.1 / unknown
    issues: list[ConversionIssue] = []

    @property
    def ok(self) -> bool:
        return not self.issues

    def issues_for(self, stage: str) -> list[ConversionIssue]:
        return [i for i in self.issues if i.stage == stage]

    def summary(self) -> str:
        """Render a human readable summary of the run."""
        if self.ok:
            return "Conversion completed with no validation issues."

        lines = [f"Conversion completed with {len(self.issues)} validation issue(s):"]
        for stage, title in (("input", "Input validation"), ("output", "Output validation")):
            stage_issues = self.issues_for(stage)
            if not stage_issues:
                continue
            lines.append(f"{title}:")
            for n, issue in enumerate(stage_issues, start=1):
                where = issue.location or "<document>"
                lines.append(f"  {n}. {where}: {issue.message}")
        return "\n".join(lines)
