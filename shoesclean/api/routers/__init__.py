# This file marks the routers package for API route modules.
# The package groups endpoint modules by resource so registration order stays explicit in app.py.
