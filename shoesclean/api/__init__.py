"""
HTTP layer for the service catalog: application factory, routers, validation, and storage access.
"""
