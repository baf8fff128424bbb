"""
Gemini client wrapper.

Wraps the synchronous google-genai client so pipelines can await text
and image generation. Text calls back off on rate limiting.

Dependencies: google.genai, asyncio, toolbox.core.retry, toolbox.configs
System role: Shared Gemini access for discovery, news, SEO and enrichment
"""

import asyncio
import base64
import logging
from dataclasses import dataclass
from functools import lru_cache

from google import genai
from google.genai import types

from toolbox.configs import get_settings
from toolbox.core.exceptions import LLMNotConfiguredError
from toolbox.core.retry import with_rate_limit_retry

logger = logging.getLogger(__name__)


@dataclass
class GeneratedImage:
    """Base64 image payload returned by the image model."""

    base64_data: str
    mime_type: str = "image/png"

    @property
    def extension(self) -> str:
        return self.mime_type.split("/")[-1] or "png"


class GeminiClient:
    """Async facade over genai.Client."""

    def __init__(self, api_key: str, text_model: str, image_model: str) -> None:
        """
        Initialize the client.

        Args:
            api_key: Gemini API key
            text_model: Default model for text generation
            image_model: Model used by generate_image
        """
        self._client = genai.Client(api_key=api_key)
        self.text_model = text_model
        self.image_model = image_model

    async def generate_text(
        self,
        prompt: str,
        model: str | None = None,
        temperature: float | None = None,
        top_k: int | None = None,
        top_p: float | None = None,
        max_output_tokens: int | None = None,
        retry_on_rate_limit: bool = True,
    ) -> str:
        """
        Generate text for a single prompt.

        Args:
            prompt: Full prompt text
            model: Override for the default text model
            temperature: Sampling temperature
            top_k: Top-k sampling
            top_p: Nucleus sampling
            max_output_tokens: Response length cap
            retry_on_rate_limit: Back off and retry on HTTP 429

        Returns:
            str: Response text ("" when the model returned no text)
        """
        config = None
        if any(v is not None for v in (temperature, top_k, top_p, max_output_tokens)):
            config = types.GenerateContentConfig(
                temperature=temperature,
                top_k=top_k,
                top_p=top_p,
                max_output_tokens=max_output_tokens,
            )

        async def _call():
            return await asyncio.to_thread(
                self._client.models.generate_content,
                model=model or self.text_model,
                contents=prompt,
                config=config,
            )

        if retry_on_rate_limit:
            response = await with_rate_limit_retry(_call)
        else:
            response = await _call()
        return response.text or ""

    async def generate_image(self, prompt: str) -> GeneratedImage | None:
        """
        Generate one image and return it base64-encoded.

        Returns:
            GeneratedImage, or None when the response carried no image part
        """
        response = await asyncio.to_thread(
            self._client.models.generate_content,
            model=self.image_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.7,
                top_k=40,
                top_p=0.95,
            ),
        )
        for candidate in response.candidates or []:
            if candidate.content is None:
                continue
            for part in candidate.content.parts or []:
                if getattr(part, "inline_data", None) and part.inline_data.data:
                    image_data = part.inline_data
                    return GeneratedImage(
                        base64_data=base64.b64encode(image_data.data).decode("utf-8"),
                        mime_type=image_data.mime_type or "image/png",
                    )
        logger.warning("Image generation response didn't contain image data")
        return None


def is_gemini_configured() -> bool:
    """True when GEMINI_API_KEY is set."""
    return get_settings().gemini.is_configured


@lru_cache
def get_gemini_client() -> GeminiClient:
    """
    Return the process-wide GeminiClient.

    Raises:
        LLMNotConfiguredError: If GEMINI_API_KEY is missing
    """
    settings = get_settings().gemini
    if not settings.is_configured:
        raise LLMNotConfiguredError("gemini", "GEMINI_API_KEY")
    return GeminiClient(
        api_key=settings.api_key,
        text_model=settings.text_model,
        image_model=settings.image_model,
    )
