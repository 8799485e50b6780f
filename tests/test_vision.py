"""VisionClient backend tests"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch


async def test_claude_vision_generate_sends_image_and_prompt():
    from src.vision.claude import ClaudeVisionClient

    mock_response = MagicMock()
    mock_response.content = [MagicMock(text="  Happy  ")]

    with patch("src.vision.claude.AsyncAnthropic") as mock_cls:
        mock_anthropic = AsyncMock()
        mock_anthropic.messages.create = AsyncMock(return_value=mock_response)
        mock_cls.return_value = mock_anthropic

        client = ClaudeVisionClient(api_key="test-key")
        await client.generate("aGVsbG8=", "image/png", "What emotion?")

    mock_cls.assert_called_once_with(api_key="test-key")
    mock_anthropic.messages.create.assert_called_once()
    content = mock_anthropic.messages.create.call_args.kwargs["messages"][0]["content"]
    image = next(b for b in content if b["type"] == "image")
    assert image["source"] == {"type": "base64", "media_type": "image/png", "data": "aGVsbG8="}
    text_blocks = [b for b in content if b["type"] == "text"]
    assert text_blocks[0]["text"] == "What emotion?"


async def test_claude_vision_generate_returns_raw_text():
    """Trimming and empty handling belong to the analyzer, not the backend."""
    from src.vision.claude import ClaudeVisionClient

    mock_response = MagicMock()
    mock_response.content = [MagicMock(text="  Sad \n")]

    with patch("src.vision.claude.AsyncAnthropic") as mock_cls:
        mock_anthropic = AsyncMock()
        mock_anthropic.messages.create = AsyncMock(return_value=mock_response)
        mock_cls.return_value = mock_anthropic

        result = await ClaudeVisionClient(api_key="k").generate("x", "image/jpeg", "p")

    assert result == "  Sad \n"


async def test_claude_vision_generate_empty_content_returns_empty_string():
    from src.vision.claude import ClaudeVisionClient

    mock_response = MagicMock()
    mock_response.content = []

    with patch("src.vision.claude.AsyncAnthropic") as mock_cls:
        mock_anthropic = AsyncMock()
        mock_anthropic.messages.create = AsyncMock(return_value=mock_response)
        mock_cls.return_value = mock_anthropic

        result = await ClaudeVisionClient(api_key="k").generate("x", "image/jpeg", "p")

    assert result == ""


async def test_claude_vision_generate_raises_on_api_error():
    from src.vision.claude import ClaudeVisionClient

    with patch("src.vision.claude.AsyncAnthropic") as mock_cls:
        mock_anthropic = AsyncMock()
        mock_anthropic.messages.create = AsyncMock(side_effect=RuntimeError("API down"))
        mock_cls.return_value = mock_anthropic

        client = ClaudeVisionClient(api_key="k")
        with pytest.raises(RuntimeError):
            await client.generate("x", "image/jpeg", "p")


# ── OpenAIVisionClient ────────────────────────────────────────────────────────


def _openai_response(content):
    mock_choice = MagicMock()
    mock_choice.message.content = content
    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


async def test_openai_vision_generate_sends_data_url():
    from src.vision.openai import OpenAIVisionClient

    with patch("src.vision.openai.AsyncOpenAI") as mock_cls:
        mock_openai = AsyncMock()
        mock_openai.chat.completions.create = AsyncMock(return_value=_openai_response("Angry"))
        mock_cls.return_value = mock_openai

        client = OpenAIVisionClient(api_key="test-key")
        result = await client.generate("aGVsbG8=", "image/webp", "What emotion?")

    assert result == "Angry"
    content = mock_openai.chat.completions.create.call_args.kwargs["messages"][0]["content"]
    image = next(b for b in content if b["type"] == "image_url")
    assert image["image_url"]["url"] == "data:image/webp;base64,aGVsbG8="
    text_blocks = [b for b in content if b["type"] == "text"]
    assert text_blocks[0]["text"] == "What emotion?"


async def test_openai_vision_generate_none_content_returns_empty_string():
    from src.vision.openai import OpenAIVisionClient

    with patch("src.vision.openai.AsyncOpenAI") as mock_cls:
        mock_openai = AsyncMock()
        mock_openai.chat.completions.create = AsyncMock(return_value=_openai_response(None))
        mock_cls.return_value = mock_openai

        result = await OpenAIVisionClient(api_key="k").generate("x", "image/jpeg", "p")

    assert result == ""


async def test_openai_vision_generate_no_choices_returns_empty_string():
    from src.vision.openai import OpenAIVisionClient

    mock_response = MagicMock()
    mock_response.choices = []

    with patch("src.vision.openai.AsyncOpenAI") as mock_cls:
        mock_openai = AsyncMock()
        mock_openai.chat.completions.create = AsyncMock(return_value=mock_response)
        mock_cls.return_value = mock_openai

        result = await OpenAIVisionClient(api_key="k").generate("x", "image/jpeg", "p")

    assert result == ""


async def test_openai_vision_generate_raises_on_api_error():
    from src.vision.openai import OpenAIVisionClient

    with patch("src.vision.openai.AsyncOpenAI") as mock_cls:
        mock_openai = AsyncMock()
        mock_openai.chat.completions.create = AsyncMock(side_effect=RuntimeError("API down"))
        mock_cls.return_value = mock_openai

        client = OpenAIVisionClient(api_key="k")
        with pytest.raises(RuntimeError):
            await client.generate("x", "image/jpeg", "p")
