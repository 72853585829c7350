"""Greentext Transformer — raw journal text in, greentext out, never fails.

Invariants:
    - Exactly one generator attempt per call; no retries, no cache
    - Any generator failure (GeneratorAPIError or unexpected exception) or a blank
      reply yields fallback_greentext(content)
    - A missing generator (no API key configured) goes straight to the fallback
    - Successful model output is returned trimmed and otherwise verbatim

Design Decisions:
    - Graceful degradation over error propagation: the endpoint must always store
      an entry, so generator failures are logged and absorbed here
"""

import logging

from diary.core.errors import GeneratorAPIError
from diary.core.greentext import (
    build_greentext_prompt, fallback_greentext, normalize_generated_text,
)
from diary.core.repository_protocols import TextGenerator

logger = logging.getLogger(__name__)


class GreentextTransformer:
    """Turns journal text into greentext via the generator, or the fallback."""

    def __init__(self, generator: TextGenerator | None):
        self.generator = generator

    async def transform(self, content: str) -> str:
        content = content.strip()
        if self.generator is None:
            logger.warning("No text generator configured, using fallback greentext")
            return fallback_greentext(content)

        try:
            reply = await self.generator.generate(build_greentext_prompt(content))
        except GeneratorAPIError as e:
            logger.error(
                f"Generator call failed, using fallback: {e.message}",
                extra={
                    "error_code": e.code,
                    "api_error_type": e.api_error_type,
                },
            )
            return fallback_greentext(content)
        except Exception as e:
            logger.error(
                f"Unexpected generator error, using fallback: {e}",
                exc_info=True,
            )
            return fallback_greentext(content)

        greentext = normalize_generated_text(reply)
        if greentext is None:
            logger.error("Generator returned blank text, using fallback")
            return fallback_greentext(content)
        return greentext
