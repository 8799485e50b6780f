"""ClaudeVisionClient — Anthropic Claude vision backend."""
from anthropic import AsyncAnthropic

from src.constants import CLAUDE_VISION_MODEL, VISION_MAX_TOKENS
from src.vision.client import VisionClient


class ClaudeVisionClient(VisionClient):
    name = "claude"

    def __init__(self, api_key: str) -> None:
        self._client = AsyncAnthropic(api_key=api_key)

    async def generate(self, image_base64: str, mime_type: str, prompt: str) -> str:
        message = await self._client.messages.create(
            model=CLAUDE_VISION_MODEL,
            max_tokens=VISION_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": mime_type,
                                "data": image_base64,
                            },
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )
        return "".join(
            getattr(block, "text", "") for block in message.content
        )
