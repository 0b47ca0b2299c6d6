"""
Mock LLM Client - Offline golf concierge.
Answers from fixed, keyword-matched replies so the app works without any
LLM credentials. It never produces trip plans; planners fall back to the
deterministic engine instead.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


GOLF_REPLY = (
    "Based on your preferences, I'd recommend TPC Myrtle Beach for championship-level play, "
    "Caledonia Golf & Fish Club for its historic charm, and Dunes Golf & Beach Club for stunning "
    "ocean views. Each offers unique challenges and world-class amenities. Would you like specific "
    "details about any of these courses or recommendations based on your skill level?"
)

HOTEL_REPLY = (
    "For your trip, I recommend The Ocean House for luxury oceanfront accommodations, or the "
    "Marriott Myrtle Beach Resort which offers excellent golf packages and amenities. Both are "
    "conveniently located near the golf courses in your itinerary. Would you like me to include "
    "either in your plan?"
)

DINING_REPLY = (
    "For dining, I recommend Sea Captain's House for fresh seafood with ocean views, and The "
    "Cypress Grill for premium steaks. Both have excellent ratings. Would you like me to add these "
    "to your plan?"
)

PLAN_REPLY = (
    "I'd be happy to generate a complete trip plan for you! I'll include golf courses, "
    "accommodations, dining options, and any additional activities you mentioned. Would you like "
    "me to proceed?"
)

DEFAULT_REPLY = (
    "I'm here to help plan your perfect golf getaway! I can recommend golf courses, accommodations, "
    "restaurants, and activities based on your preferences. What specific aspect of your trip would "
    "you like assistance with?"
)

# Checked in order; first match wins
KEYWORD_REPLIES = [
    (("golf", "course"), GOLF_REPLY),
    (("hotel", "stay", "accommodation"), HOTEL_REPLY),
    (("restaurant", "dining", "eat"), DINING_REPLY),
]


def budget_reply(budget_min=None, budget_max=None) -> str:
    low = budget_min if budget_min else 1000
    high = budget_max if budget_max else 2000
    return (
        f"Based on your budget of ${low:,.0f}-${high:,.0f} per person, I can create a customized "
        "package that includes quality golf courses, comfortable accommodations, and dining options "
        "that fit your preferences. Would you like me to optimize for value or premium experiences?"
    )


class MockLLMClient:
    """Keyword-driven stand-in for a chat model."""

    def __init__(self):
        self.model = "mock-concierge"

    def reply(self, message: str, budget_min=None, budget_max=None) -> str:
        """Pick a canned reply for a user message."""
        text = (message or "").lower()
        for keywords, response in KEYWORD_REPLIES:
            if any(k in text for k in keywords):
                return response
        if any(k in text for k in ("budget", "cost", "price")):
            return budget_reply(budget_min, budget_max)
        if any(k in text for k in ("plan", "generate", "itinerary")):
            return PLAN_REPLY
        return DEFAULT_REPLY

    async def chat(
        self,
        messages: list[dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> str:
        if json_mode:
            logger.info("Mock LLM does not produce structured output")
            return "{}"
        user_msg = next((m["content"] for m in reversed(messages) if m["role"] == "user"), "")
        return self.reply(user_msg)
