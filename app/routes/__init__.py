"""
Routes package for the deployment gateway.

This package contains all the route handlers organized by functionality:
- health: health check
- deployments: listing, deploying and cleaning up branch deployments
- branches: remote git branches
- proxy: reverse proxy route table
"""

from .branches import router as branches_router
from .deployments import router as deployments_router
from .health import router as health_router
from .proxy import router as proxy_router

__all__ = ["health_router", "deployments_router", "branches_router", "proxy_router"]
