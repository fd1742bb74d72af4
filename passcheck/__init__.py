"""passcheck -- password strength checking.

Scores a password against a fixed, ordered set of heuristic rules and maps
the result onto a named strength tier.  Everything runs locally; the
password is never sent or stored anywhere.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)


# ── Data model ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Criterion:
    """One rule applied to the current input."""

    label: str
    met: bool


class Rule(NamedTuple):
    label: str
    predicate: Callable[[str], bool]


@dataclass(frozen=True)
class Tier:
    """A named strength level plus the colours used to display it."""

    label: str
    color: str
    bar_color: str


# ── Rules ──────────────────────────────────────────────────────────────────

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")  # \d would also match non-ASCII digits
_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

RULES = (
    Rule("At least 8 characters", lambda pwd: len(pwd) >= 8),
    Rule("Contains uppercase letter", lambda pwd: bool(_UPPER_RE.search(pwd))),
    Rule("Contains lowercase letter", lambda pwd: bool(_LOWER_RE.search(pwd))),
    Rule("Contains number", lambda pwd: bool(_DIGIT_RE.search(pwd))),
    Rule("Contains special character", lambda pwd: bool(_SPECIAL_RE.search(pwd))),
    Rule("At least 12 characters", lambda pwd: len(pwd) >= 12),
)


# ── Tiers ──────────────────────────────────────────────────────────────────

NO_PASSWORD = Tier("No password", "#9ca3af", "#e5e7eb")
WEAK = Tier("Weak", "#dc2626", "#ef4444")
MODERATE = Tier("Moderate", "#ea580c", "#f97316")
STRONG = Tier("Strong", "#2563eb", "#3b82f6")
VERY_STRONG = Tier("Very Strong", "#16a34a", "#22c55e")

# (exclusive upper bound, tier), checked in order; None catches the rest
TIERS = (
    (33, WEAK),
    (66, MODERATE),
    (90, STRONG),
    (None, VERY_STRONG),
)


def tier_for_score(score: float) -> Tier:
    """Map a non-empty password's score onto its tier."""
    for upper, tier in TIERS:
        if upper is None or score < upper:
            return tier


# ── Evaluation ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Assessment:
    """The result of evaluating one password.

    ``criteria`` is empty for the empty password: no rules are run at all,
    which is distinct from every rule being unmet.
    """

    score: float
    tier: Tier
    criteria: tuple[Criterion, ...] = ()

    @property
    def label(self) -> str:
        return self.tier.label

    @property
    def met_count(self) -> int:
        return sum(c.met for c in self.criteria)

    def as_dict(self) -> dict:
        return {
            "score": round(self.score, 2),
            "label": self.label,
            "criteria": [{"label": c.label, "met": c.met} for c in self.criteria],
        }


def evaluate(password: str, rules=RULES) -> Assessment:
    """Evaluate *password* against *rules* and return an :class:`Assessment`.

    The score is the percentage of satisfied rules, clamped to 100.  An empty
    password short-circuits to the "No password" tier with no criteria.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be a str, not {type(password).__name__}")

    if not password:
        return Assessment(score=0.0, tier=NO_PASSWORD)

    criteria = tuple(Criterion(rule.label, rule.predicate(password)) for rule in rules)
    met = sum(c.met for c in criteria)
    score = min(met / len(criteria) * 100, 100.0) if criteria else 0.0
    tier = tier_for_score(score)

    logger.debug("%d/%d rules met, score %.1f (%s)", met, len(criteria), score, tier.label)
    return Assessment(score=score, tier=tier, criteria=criteria)
