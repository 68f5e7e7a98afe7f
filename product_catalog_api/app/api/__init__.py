"""
API package containing the routers.

``router.py`` exposes a single ``router`` that includes every endpoint
module under ``endpoints``.
"""
