"""OpenAI-backed planning agent: turns a plan request into raw JSON text."""
import json
import logging
from typing import Optional, Protocol

from openai import AsyncOpenAI

from tandadj.config import AGENT_TIMEOUT_SEC, OPENAI_API_KEY, OPENAI_MODEL
from tandadj.core.prompts import PLAN_SCHEMA, PLAN_SCHEMA_NAME, build_instructions

logger = logging.getLogger(__name__)


class PlanningAgent(Protocol):
    """Anything that can answer a plan request with raw response text."""
    name: str

    async def plan(self, request: dict) -> str:
        ...


class OpenAIPlanningAgent:
    """Calls the OpenAI Responses API with a strict JSON schema."""

    def __init__(
        self,
        api_key: str,
        model: str = OPENAI_MODEL,
        timeout_sec: float = AGENT_TIMEOUT_SEC,
    ) -> None:
        self.name = model
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout_sec, max_retries=0)

    async def plan(self, request: dict) -> str:
        response = await self._client.responses.create(
            model=self.name,
            instructions=build_instructions(request.get("userPrompt") or ""),
            input=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "input_text",
                            "text": json.dumps(
                                {"pattern": request["pattern"], "tracks": request["tracks"]}
                            ),
                        }
                    ],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": PLAN_SCHEMA_NAME,
                    "schema": PLAN_SCHEMA,
                    "strict": True,
                }
            },
        )
        return response.output_text or ""


def get_planning_agent(api_key: str = OPENAI_API_KEY) -> Optional[OpenAIPlanningAgent]:
    """Return the configured agent, or None if OPENAI_API_KEY is not set."""
    if not api_key:
        logger.info("OPENAI_API_KEY not set; playlists will use the fallback planner")
        return None
    return OpenAIPlanningAgent(api_key=api_key)
