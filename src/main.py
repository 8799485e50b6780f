"""Entry point — wires Config → VisionClient → EmotionAnalyzer → FastAPI → uvicorn."""
import logging
from typing import Optional

import uvicorn
from rich.logging import RichHandler

from src.config import Config
from src.constants import MSG_API_KEY_MISSING, MSG_SERVER_STARTING, MSG_USING_BACKEND
from src.inference import EmotionAnalyzer
from src.vision.claude import ClaudeVisionClient
from src.vision.client import VisionClient
from src.vision.openai import OpenAIVisionClient
from src.web.app import create_app

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_vision_client(config: Config) -> Optional[VisionClient]:
    """Claude when its key is set, else OpenAI, else None (analysis disabled)."""
    if not config.has_vision_credentials:
        return None
    match (config.anthropic_api_key, config.openai_api_key):
        case (str() as k, _) if k:
            return ClaudeVisionClient(k)
        case (_, str() as k) if k:
            return OpenAIVisionClient(k)
        case _:
            return None


def build_analyzer(config: Config) -> EmotionAnalyzer:
    vision = build_vision_client(config)
    match vision:
        case None:
            logger.error(MSG_API_KEY_MISSING)
        case client:
            logger.info(MSG_USING_BACKEND, client.name)
    return EmotionAnalyzer(vision)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger.info(MSG_SERVER_STARTING, config.host, config.port)
    app = create_app(build_analyzer(config))
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
