from fastapi import Query

from news_api.config import settings


class PageParams:
    """
    Reusable FastAPI dependency that parses the ``limit`` / ``p`` query
    parameters shared by the list endpoints.

    Attributes
    ----------
    limit:
        Maximum number of rows returned (defaults to
        ``settings.DEFAULT_PAGE_SIZE``).
    offset:
        Number of rows skipped before the first one returned, read from
        ``p`` and used as the SQL OFFSET unchanged.

    Non-integer or negative values fail request validation, which the
    error pipeline reports as a 400.
    """

    def __init__(
        self,
        limit: int | None = Query(None, ge=0, description="Maximum rows returned."),
        p: int = Query(0, ge=0, description="Rows to skip (SQL OFFSET)."),
    ) -> None:
        self.limit = settings.DEFAULT_PAGE_SIZE if limit is None else limit
        self.offset = p
