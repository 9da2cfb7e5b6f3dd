from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from .interface import IOutfitApi
from .type import GraphQLResponse, OutfitApiConfig, OutfitApiError, OutfitData
from .constant import *


class OutfitApi(IOutfitApi):
    """GraphQL client for outfit layer data.

    Example:
        >>> async with httpx.AsyncClient() as http:
        ...     api = OutfitApi(OutfitApiConfig(), http)
        ...     outfit = await api.fetch_outfit("1234")
        ...     urls = outfit.layer_urls(600)
    """

    def __init__(self, config: OutfitApiConfig, client: Optional[httpx.AsyncClient] = None):
        """Initialize client.

        Args:
            config: API configuration
            client: Shared httpx client; one is created if omitted
        """
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=config.timeout_seconds,
            headers={"User-Agent": config.user_agent},
        )

    async def fetch_outfit(self, outfit_id: str) -> OutfitData:
        """Fetch the layers of one outfit.

        Args:
            outfit_id: Outfit id without zero padding (e.g. "1234")

        Returns:
            Parsed OutfitData

        Raises:
            OutfitApiError: On transport errors, non-2xx responses, GraphQL
                errors, a missing outfit, or a malformed payload
        """
        logger.debug(f"Fetching outfit data for outfit {outfit_id}")
        try:
            response = await self._client.post(
                self.config.url,
                json={
                    "query": OUTFIT_LAYERS_QUERY,
                    "variables": {"outfitId": outfit_id},
                },
                timeout=self.config.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise OutfitApiError(
                outfit_id, [ERROR_TRANSPORT.format(outfit_id=outfit_id, error=exc)]
            ) from exc

        if response.status_code >= 400:
            raise OutfitApiError(
                outfit_id,
                [ERROR_HTTP_STATUS.format(outfit_id=outfit_id, status=response.status_code)],
            )

        try:
            payload = GraphQLResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise OutfitApiError(
                outfit_id, [ERROR_INVALID_PAYLOAD.format(outfit_id=outfit_id, error=exc)]
            ) from exc

        if payload.errors:
            raise OutfitApiError(outfit_id, [e.message for e in payload.errors])

        outfit = (payload.data or {}).get("outfit")
        if not outfit:
            raise OutfitApiError(
                outfit_id, [ERROR_OUTFIT_NOT_FOUND.format(outfit_id=outfit_id)]
            )

        try:
            return OutfitData.model_validate(outfit)
        except ValidationError as exc:
            raise OutfitApiError(
                outfit_id, [ERROR_INVALID_PAYLOAD.format(outfit_id=outfit_id, error=exc)]
            ) from exc

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["OutfitApi"]
