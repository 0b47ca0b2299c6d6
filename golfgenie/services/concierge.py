"""
Golf Concierge - Chat replies about the user's trip.
"""
import json
import logging
from typing import Optional

from ..models.trip import TripConstraints
from .llm_client import LLMClient, get_llm_client
from .mock_llm import MockLLMClient

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 6


CONCIERGE_SYSTEM_PROMPT = """You are GolfGenie AI, an expert golf trip planning assistant specializing in {destination} golf vacations.

Current trip details:
{trip}

Help the user plan the perfect golf trip with personalized recommendations for golf courses, accommodations, dining, and activities based on their preferences.
- Suggest specific golf courses that match their skill level and budget
- Recommend accommodations that meet their preferences
- Suggest dining options that align with their cuisine preferences
- Offer additional activities based on their interests

Be friendly, specific, and concise."""


class ConciergeService:
    """Answers trip questions with the LLM, or canned replies offline."""

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm or get_llm_client()
        self.offline = MockLLMClient()

    def _offline_reply(self, message: str, constraints: Optional[TripConstraints]) -> str:
        if constraints is None:
            return self.offline.reply(message)
        return self.offline.reply(message, constraints.budget_min, constraints.budget_max)

    async def reply(
        self,
        message: str,
        constraints: Optional[TripConstraints] = None,
        history: Optional[list[dict]] = None
    ) -> str:
        """
        Reply to a user message.

        Args:
            message: The user's message
            constraints: Trip details, if the user has filled in the form
            history: Prior messages as role/content dicts

        Returns:
            The assistant's reply
        """
        if self.llm.is_mock:
            return self._offline_reply(message, constraints)

        trip = constraints.model_dump(mode="json") if constraints else {}
        destination = constraints.destination if constraints else "Myrtle Beach"
        messages = [
            {"role": "system", "content": CONCIERGE_SYSTEM_PROMPT.format(
                destination=destination,
                trip=json.dumps(trip, indent=2)
            )},
            *(history or [])[-HISTORY_LIMIT:],
            {"role": "user", "content": message}
        ]

        try:
            response = await self.llm.chat(messages, temperature=0.7, max_tokens=500)
        except Exception as e:
            logger.error(f"Concierge LLM error: {e}")
            return self._offline_reply(message, constraints)

        return response or self._offline_reply(message, constraints)


# Global concierge instance
concierge: Optional[ConciergeService] = None


def get_concierge() -> ConciergeService:
    """Get or create the global concierge."""
    global concierge
    if concierge is None:
        concierge = ConciergeService()
    return concierge
