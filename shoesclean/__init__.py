"""
Package root for the Shoesclean service catalog API.
It groups the HTTP layer, shared helpers, and the Python API client under one import path.
Most functionality lives in the subpackages; this file intentionally stays lightweight.
"""
