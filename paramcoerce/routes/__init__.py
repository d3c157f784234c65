"""
FastAPI routers and dependencies for all API endpoints.

Each module defines a router for a specific concern (health, parameters).
"""
