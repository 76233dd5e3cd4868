import logging

import google.generativeai as genai

from app.config import GEMINI_MODEL

logger = logging.getLogger(__name__)


class GeminiClient:
    """Sends a single text prompt to a Gemini model and returns the reply text."""

    def __init__(self, model: genai.GenerativeModel):
        self.model = model

    async def send(self, prompt: str) -> str:
        response = await self.model.generate_content_async(prompt)
        # `.text` raises ValueError itself when the candidate was blocked
        return response.text


def create_client(api_key: str | None, model_name: str = GEMINI_MODEL) -> GeminiClient | None:
    """
    Returns a ready client, or None when AI features must stay disabled
    (no key configured or the SDK refused to initialize).
    """
    if not api_key:
        logger.warning("Gemini API key not found. AI features are disabled.")
        return None

    try:
        genai.configure(api_key=api_key)
        model = genai.GenerativeModel(model_name)
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client. AI features will be disabled: {e}")
        return None

    logger.info(f"Gemini client initialized with model {model_name}")
    return GeminiClient(model)
