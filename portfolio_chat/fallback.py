"""
Rule-based fallback responder.

Used whenever the remote model is unavailable or a remote call fails. The
input is lower-cased and tested against an ordered rule table; the first
matching rule wins. Predicates overlap ("I manage a team and care about
client satisfaction" is both leadership and satisfaction), so the order of
DEFAULT_RULES is part of the behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from portfolio_chat.types import ChatResult, ResponseSource

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class MatchRule:
    category: str
    predicate: Predicate
    message: str

    def matches(self, text: str) -> bool:
        return self.predicate(text)


def contains_any(*needles: str) -> Predicate:
    return lambda text: any(needle in text for needle in needles)


def contains_all(*predicates: Predicate) -> Predicate:
    return lambda text: all(p(text) for p in predicates)


AI_TOOLING_MESSAGE = (
    "I've built several AI tools: an appraisal generator that cut report time from "
    "6 hours to 30 minutes (92% reduction), a team performance analytics dashboard "
    "with AI-driven action plans, and a presales automation tool that was adopted by "
    "80% of the department. I don't just talk about AI. I build it."
)

LEADERSHIP_MESSAGE = (
    "I lead a team of 10 consultants at Odoo Middle East. I developed an onboarding "
    "program that gets new hires leading projects within 2-3 months, implemented agile "
    "methodologies that cut delivery time by 30%, and maintain a 96% client satisfaction "
    "rate. I believe in empowering my team and leading by example."
)

SATISFACTION_MESSAGE = (
    "I maintain a 96% client satisfaction rate. The secret? Proactive communication, "
    "managing expectations honestly, and always delivering more than promised. I once "
    "turned a frustrated 2/5-rated client into a 5/5 strategic partner by truly "
    "listening to their needs and delivering a tailored solution."
)

PROJECT_COUNT_MESSAGE = (
    "I've successfully delivered 32+ ERP implementations across diverse industries "
    "including F&B, Retail, eCommerce, and Services. Each project taught me something "
    "new about business transformation. 28+ companies went live with the solutions I "
    "implemented."
)

EXPERIENCE_MESSAGE = (
    "I'm a Digital Transformation Leader with 7+ years of experience spanning ERP "
    "consulting, team leadership, and AI tool development. I hold a Master's in Computer "
    "Science & Business Technology from IE Madrid (scholarship recipient) and a BA in "
    "Economics from AUB. Currently leading digital transformation initiatives at Odoo "
    "Middle East."
)

EDUCATION_MESSAGE = (
    "I completed my Master's in Computer Science & Business Technology at IE Madrid "
    "(2019-2020) where I received the IE Foundation Scholarship. Before that, I earned "
    "my BA in Economics from the American University of Beirut. I speak Arabic, "
    "English, and French fluently."
)

DIFFERENTIATION_MESSAGE = (
    "Most consultants recommend solutions. I build them. When I saw our performance "
    "reviews taking 6 hours, I didn't write a report about it; I built an AI tool that "
    "automated it. That's my 'Where Strategy Meets Code' approach. I bridge the gap "
    "between strategic thinking and technical execution."
)

HIRING_PITCH_MESSAGE = (
    "Because I deliver results. I've led 32+ successful implementations, enabled $250K+ "
    "in sales, and maintain 96% client satisfaction. But beyond numbers, I'm a builder "
    "who thinks strategically and executes technically. I don't just identify problems; "
    "I create solutions. That's what makes me valuable."
)

DEFAULT_MESSAGE = (
    "Great question! Let me tell you more: I'm a Digital Transformation Leader with 7+ "
    "years of experience. I've built AI tools (like an appraisal generator that saved 92% "
    "of time), led 32+ ERP projects, and manage a team of 10 consultants. What "
    "specifically would you like to know about my experience?"
)

DEFAULT_RULES: Sequence[MatchRule] = (
    MatchRule(
        "ai_tooling",
        contains_all(contains_any("ai"), contains_any("project", "build", "tool")),
        AI_TOOLING_MESSAGE,
    ),
    MatchRule("leadership", contains_any("leader", "team", "manage"), LEADERSHIP_MESSAGE),
    MatchRule("satisfaction", contains_any("96", "satisfaction", "client"), SATISFACTION_MESSAGE),
    MatchRule("project_count", contains_any("how many", "project"), PROJECT_COUNT_MESSAGE),
    MatchRule("experience", contains_any("experience", "background"), EXPERIENCE_MESSAGE),
    MatchRule(
        "education",
        contains_any("education", "study", "school", "ie", "madrid"),
        EDUCATION_MESSAGE,
    ),
    MatchRule("differentiation", contains_any("different", "unique", "special"), DIFFERENTIATION_MESSAGE),
    MatchRule("hiring_pitch", contains_any("hire", "why you"), HIRING_PITCH_MESSAGE),
)


class FallbackMatcher:
    """Maps free text to one of a fixed set of canned answers."""

    def __init__(
        self,
        rules: Iterable[MatchRule] = DEFAULT_RULES,
        default_message: str = DEFAULT_MESSAGE,
    ):
        self._rules = tuple(rules)
        self._default_message = default_message

    @property
    def rules(self) -> List[MatchRule]:
        return list(self._rules)

    @property
    def default_message(self) -> str:
        return self._default_message

    def match(self, user_message: Optional[str]) -> Optional[MatchRule]:
        text = (user_message or "").lower()
        for rule in self._rules:
            if rule.matches(text):
                return rule
        return None

    def resolve(self, user_message: Optional[str]) -> ChatResult:
        rule = self.match(user_message)
        message = rule.message if rule else self._default_message
        return ChatResult(success=True, message=message, source=ResponseSource.FALLBACK)
