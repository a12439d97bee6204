"""Prompt construction for the remote generation path.

The context sentence is order-sensitive: identical profiles must always
produce byte-identical prompts.
"""

from typing import List

from portfolio_chat.types import Profile


SUGGESTED_QUESTIONS: List[str] = [
    "What AI projects have you built?",
    "Tell me about your leadership experience",
    "How did you increase client satisfaction?",
    "What makes you different?",
    "Why should I hire you?",
    "What's your experience with ERP systems?",
]

FIRST_PERSON_INSTRUCTION = "respond in first person, 2-3 sentences"


def build_context(profile: Profile) -> str:
    m = profile.metrics
    return (
        f"I'm {profile.name}, {profile.current_role}. "
        f"Key achievements: {m.projects_delivered} projects, "
        f"{m.client_satisfaction} satisfaction, ${m.sales_enabled} sales enabled. "
        f"I built AI tools, lead a team of {m.team_size}, "
        f"and specialize in digital transformation."
    )


def build_prompt(profile: Profile, user_message: str) -> str:
    """Persona preamble, profile context, the question, and the answer cue."""
    return (
        f"You are {profile.name}. {build_context(profile)}\n\n"
        f"User: {user_message}\n\n"
        f"{profile.first_name} ({FIRST_PERSON_INSTRUCTION}):"
    )


def get_suggested_questions() -> List[str]:
    return list(SUGGESTED_QUESTIONS)
