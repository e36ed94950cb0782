"""
Exceptions raised by the catalog package.

Route handlers raise these and the handlers registered in
``leetsearch.main`` turn them into JSON responses. The message given to
the client is fixed per exception type; the exception's own text only
ever reaches the server log.
"""


class CatalogError(Exception):
    status_code = 500
    public_message = "Internal server error"


class ValidationError(CatalogError):
    """The inbound request is missing something it needs."""

    status_code = 400
    public_message = "Missing search query"


class TransportError(CatalogError):
    """Talking to the upstream catalog failed or returned garbage."""

    status_code = 500
    public_message = "Failed to fetch problems"
