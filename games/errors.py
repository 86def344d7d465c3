# games/errors.py
"""
Error taxonomy for the catalog crawler.

Fatal errors (FatalFetchError, FatalLookupError) propagate out of the crawl
and end the run. DegradedResolution and PersistenceError are logged and the
crawl carries on.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for every crawler error"""


class ConfigurationError(CatalogError):
    """Invalid or missing configuration value"""


class IGDBRequestError(CatalogError):
    """A single IGDB call failed (transport, HTTP status or payload)"""

    def __init__(self, endpoint: str, status: int, detail: str = ""):
        self.endpoint = endpoint
        self.status = status
        self.detail = detail
        message = f"IGDB {endpoint} request failed"
        if status:
            message += f" with status {status}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class FatalFetchError(CatalogError):
    """The paginated games query failed; the run cannot continue"""

    def __init__(self, offset: int, cause: Exception):
        self.offset = offset
        self.cause = cause
        super().__init__(f"Failed to fetch games at offset {offset}: {cause}")


class FatalLookupError(CatalogError):
    """Every developer lookup chain of a game failed"""

    def __init__(self, involved_company_ids, errors):
        self.involved_company_ids = list(involved_company_ids)
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(
            f"Developer lookup failed for involved companies {self.involved_company_ids}: {first}"
        )


class DegradedResolution(CatalogError):
    """A resolver failed and its field was left empty"""

    def __init__(self, field_name: str, game_id: Optional[int], cause: Exception):
        self.field_name = field_name
        self.game_id = game_id
        self.cause = cause
        super().__init__(f"{field_name} unresolved for game {game_id}: {cause}")


class PersistenceError(CatalogError):
    """Writing the JSON file or the workbook failed"""

    def __init__(self, path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Could not write {self.path}: {cause}")
