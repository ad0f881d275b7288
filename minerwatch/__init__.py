"""
minerwatch - rolling hashrate telemetry for mining devices

Polls a device's HTTP API, keeps a one-hour hashrate series in sync
without fetching a point twice, and persists it across restarts.

Layer Structure:
- Domain: series buffer, history fragments, fetch window rules
- Application: merge engine, poll tick and projection use cases, DTOs
- Infrastructure: device HTTP gateway, key/value stores, scheduler
- Presentation: read-only chart API
- Shared: logging, constants and clock helpers
- Main: configuration, composition root and entry points
"""

__version__ = "0.1.0"
