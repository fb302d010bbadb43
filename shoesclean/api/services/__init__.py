# This file marks the services package for catalog storage and record lifecycle modules.
# Routers depend on these classes instead of running SQL themselves.
