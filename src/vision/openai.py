"""OpenAIVisionClient — OpenAI GPT-4o vision backend."""
from openai import AsyncOpenAI

from src.constants import OPENAI_VISION_MODEL, VISION_MAX_TOKENS
from src.vision.client import VisionClient


class OpenAIVisionClient(VisionClient):
    name = "openai"

    def __init__(self, api_key: str) -> None:
        self._client = AsyncOpenAI(api_key=api_key)

    async def generate(self, image_base64: str, mime_type: str, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=OPENAI_VISION_MODEL,
            max_tokens=VISION_MAX_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{mime_type};base64,{image_base64}"},
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )
        match response.choices:
            case []:
                return ""
            case [first, *_]:
                return first.message.content or ""
