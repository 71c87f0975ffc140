from __future__ import annotations

from typing import Protocol


class IScriptWriter(Protocol):
    """Text-generation adapter that drafts ad copy for a product.

    Implementations raise UpstreamError when the provider call fails or the
    response lacks generated text.
    """

    async def write_script(self, product: str) -> str:
        ...
