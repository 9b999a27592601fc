"""
httpreq.

- core/: Configuration model, exceptions, logging
- request/: Request building, execution and response printing (httpx)
"""

__version__ = "1.0.0"
