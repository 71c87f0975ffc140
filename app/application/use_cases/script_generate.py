from __future__ import annotations

import logging

from app.application.interfaces import IScriptWriter

logger = logging.getLogger(__name__)


class GenerateScriptUseCase:
    """Draft ad copy for a product. No retries, no local validation."""

    def __init__(self, writer: IScriptWriter) -> None:
        self._writer = writer

    async def execute(self, product: str) -> str:
        script = await self._writer.write_script(product)
        logger.info("Generated script for %r (%d chars)", product, len(script))
        return script
