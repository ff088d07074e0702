from openai import AsyncOpenAI
import openai
from saute.config import settings
from saute.exceptions import AnalysisError, ConfigurationError, QuotaExceededError
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

QUOTA_ERROR_CODE = "insufficient_quota"

class VisionModelClient:
    """Single-turn image + prompt calls against a vision-capable chat model"""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.openai_model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not settings.openai_api_key:
                raise ConfigurationError()
            # No retries: a failed call goes straight back to the learner
            self._client = AsyncOpenAI(
                api_key=settings.openai_api_key,
                max_retries=0,
                timeout=settings.request_timeout_seconds
            )
        return self._client

    @staticmethod
    def build_messages(image: str, prompt: str) -> List[Dict[str, Any]]:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {
                        "type": "image_url",
                        "image_url": {
                            "url": image,
                            "detail": settings.image_detail
                        }
                    }
                ]
            }
        ]

    async def analyze_image(self, image: str, prompt: str) -> str:
        """Send one captured frame with its prompt and return the raw reply text"""
        client = self.client

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(image, prompt),
                max_tokens=settings.analysis_max_tokens,
                temperature=settings.analysis_temperature
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenAI API error ({e.status_code}): {str(e)}")
            if e.code == QUOTA_ERROR_CODE:
                raise QuotaExceededError() from e
            raise AnalysisError() from e
        except openai.APIError as e:
            logger.error(f"OpenAI request failed: {str(e)}")
            raise AnalysisError() from e

        if not response.choices:
            raise AnalysisError()

        return response.choices[0].message.content or ""

# Create global instance
vision_client = VisionModelClient()
