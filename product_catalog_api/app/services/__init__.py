"""
Service layer abstraction.

Services hold the product logic: payload validation, query helpers
(filtering, paging, search, statistics) and the ``ProductService``
used by the API handlers.
"""
