"""
HTTP API - FastAPI routers, dependencies and middleware.
"""
