"""Reactive strength-meter state and its plain-text projections."""

from passcheck import RULES, Assessment, evaluate

BAR_WIDTH = 20
MET_GLYPH = "✓"
UNMET_GLYPH = "✗"
MASK_CHAR = "•"


class StrengthMeter:
    """Holds the current input and the assessment derived from it.

    Every call to :meth:`on_input` replaces the assessment wholesale; views
    read from :attr:`assessment` and never from each other.
    """

    def __init__(self, rules=RULES):
        self._rules = rules
        self.password = ""
        self.show_password = False
        self.assessment: Assessment = evaluate("", rules)

    def on_input(self, value: str) -> Assessment:
        self.password = value
        self.assessment = evaluate(value, self._rules)
        return self.assessment

    def toggle_visibility(self) -> bool:
        self.show_password = not self.show_password
        return self.show_password

    @property
    def display_value(self) -> str:
        if self.show_password:
            return self.password
        return MASK_CHAR * len(self.password)

    # ── Text projections ──────────────────────────────────────────────

    def summary(self) -> str:
        return f"Strength: {self.assessment.label}"

    def bar(self, width: int = BAR_WIDTH) -> str:
        score = self.assessment.score
        filled = round(score / 100 * width)
        return f"[{'#' * filled}{'-' * (width - filled)}] {score:.0f}%"

    def checklist(self) -> list[str]:
        return [
            f"  {MET_GLYPH if c.met else UNMET_GLYPH} {c.label}"
            for c in self.assessment.criteria
        ]

    def render(self) -> str:
        """Summary, bar and checklist; only the summary for empty input."""
        lines = [self.summary()]
        if self.password:
            lines.append(self.bar())
            lines.append("Password requirements:")
            lines.extend(self.checklist())
        return "\n".join(lines)
