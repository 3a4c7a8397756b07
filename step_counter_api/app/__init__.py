"""
Application package initializer.

The service is organised into the same pieces as any of our FastAPI
projects: ``core`` holds configuration, logging, error mapping and the
team store; ``schemas`` holds request/response models; ``services``
holds business logic; and ``api/v1/endpoints`` exposes the routers.
"""

from .main import app  # noqa: F401
