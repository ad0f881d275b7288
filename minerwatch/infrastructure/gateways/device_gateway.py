"""
Infrastructure Gateway - Device API Implementation

This module implements the device gateway over the AxeOS-style HTTP API
(``/api/system/info`` and ``/api/history/data``).
"""

from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import ValidationError

from minerwatch.application.dtos.history_dto import HistoryFragmentDTO
from minerwatch.domain.entities.device import DeviceInfo
from minerwatch.domain.entities.errors import DeviceGatewayError
from minerwatch.domain.entities.history import HistoryFragment
from minerwatch.domain.gateways.device_gateway import IDeviceGateway

logger = structlog.get_logger(__name__)

SYSTEM_INFO_PATH = "/api/system/info"
HISTORY_DATA_PATH = "/api/history/data"


class DeviceGateway(IDeviceGateway):
    """Implementation of the device gateway using an HTTP client."""

    def __init__(self, base_url: str, timeout: float = 10.0):
        """
        Initialize the device gateway.

        Args:
            base_url: Base URL of the device (e.g., "http://192.168.1.50")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_system_info(self, start_timestamp: int) -> DeviceInfo:
        """Fetch system info with history recorded since ``start_timestamp``."""
        url = f"{self.base_url}{SYSTEM_INFO_PATH}"
        params = {"ts": str(start_timestamp)}

        payload = await self._get_json(url, params)
        if not isinstance(payload, dict):
            raise DeviceGatewayError(
                "Device system info is not a JSON object",
                {"url": url, "type": type(payload).__name__},
            )

        history_data = payload.pop("history", None)
        history = self._parse_history(history_data) if history_data else None
        return DeviceInfo(payload=payload, history=history)

    async def get_history_since(
        self, start_timestamp: int, end_timestamp: Optional[int] = None
    ) -> Optional[HistoryFragment]:
        """Fetch history between two timestamps."""
        url = f"{self.base_url}{HISTORY_DATA_PATH}"
        params = {"ts": str(start_timestamp)}
        if end_timestamp is not None:
            params["ts_end"] = str(end_timestamp)

        payload = await self._get_json(url, params)
        return self._parse_history(payload)

    async def _get_json(self, url: str, params: Dict[str, str]) -> Any:
        logger.debug("device.request", url=url, params=params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "device.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise DeviceGatewayError(
                f"Device HTTP error {e.response.status_code}: {e.response.text}",
                {"url": url, "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.warning("device.request_error", error=str(e), url=url)
            raise DeviceGatewayError(
                f"Device request failed: {e}", {"url": url}
            ) from e

        except ValueError as e:
            logger.error("device.invalid_json", error=str(e), url=url)
            raise DeviceGatewayError(
                f"Device returned invalid JSON: {e}", {"url": url}
            ) from e

    def _parse_history(self, data: Any) -> Optional[HistoryFragment]:
        """Validate a history object; malformed fragments are discarded."""
        if not isinstance(data, dict) or not data:
            return None

        try:
            fragment = HistoryFragmentDTO.model_validate(data).to_domain()
        except ValidationError as e:
            logger.warning(
                "device.history.invalid_fragment",
                error_count=e.error_count(),
                errors=e.errors(include_url=False),
            )
            return None

        logger.debug(
            "device.history.parsed",
            count=len(fragment),
            timestamp_base=fragment.timestamp_base,
        )
        return fragment
