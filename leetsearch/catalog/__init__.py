"""
Catalog package for the problem search API.

This package holds the LeetCode GraphQL client, the schemas for both
the upstream payload and the public ``Problem`` record, the local
title filter and the ``/search`` route that ties them together.
"""

from .router import router as catalog_router  # noqa: F401
