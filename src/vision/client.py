"""VisionClient — abstract base for image analysis backends."""
from abc import ABC, abstractmethod


class VisionClient(ABC):
    name: str = "vision"

    @abstractmethod
    async def generate(self, image_base64: str, mime_type: str, prompt: str) -> str:
        """Send one image + prompt to the endpoint and return its raw text. Raises on failure."""
        ...
