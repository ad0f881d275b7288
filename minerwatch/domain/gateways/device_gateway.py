"""
Domain Gateway - Device API

This module defines the gateway interface for reading telemetry and
hashrate history from a mining device.
"""

from abc import ABC, abstractmethod
from typing import Optional

from minerwatch.domain.entities.device import DeviceInfo
from minerwatch.domain.entities.history import HistoryFragment


class IDeviceGateway(ABC):
    """Interface for the device HTTP API."""

    @abstractmethod
    async def get_system_info(self, start_timestamp: int) -> DeviceInfo:
        """
        Fetch current system info plus history recorded since a timestamp.

        Args:
            start_timestamp: Oldest history sample wanted, epoch milliseconds

        Returns:
            The info payload; ``history`` is None when the device sent no
            usable fragment

        Raises:
            DeviceGatewayError: When the request fails
        """
        pass

    @abstractmethod
    async def get_history_since(
        self, start_timestamp: int, end_timestamp: Optional[int] = None
    ) -> Optional[HistoryFragment]:
        """
        Fetch only the hashrate history between two timestamps.

        Args:
            start_timestamp: Oldest sample wanted, epoch milliseconds
            end_timestamp: Newest sample wanted; the device defaults to one
                hour after the start

        Returns:
            The fragment, or None when the device sent no usable fragment

        Raises:
            DeviceGatewayError: When the request fails
        """
        pass
