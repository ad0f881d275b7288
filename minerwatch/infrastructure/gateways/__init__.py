"""
Gateways Package - Infrastructure Layer

Concrete implementations of the gateway interfaces defined in the domain
layer.
"""

from .device_gateway import DeviceGateway

__all__ = ["DeviceGateway"]
