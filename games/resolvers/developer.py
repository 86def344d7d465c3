# games/resolvers/developer.py
"""
Developer name via involved company -> company lookups.
"""

import asyncio
import logging
from typing import Optional, Sequence

from ..errors import FatalLookupError
from ..query import company_query, involved_company_query

logger = logging.getLogger(__name__)


async def resolve_company_name(client, involved_company_id: int) -> Optional[str]:
    """
    Follow one involved company to its company name.

    Returns None when either lookup finds no row; request errors propagate.
    """
    involved = await client.query("involved_companies", involved_company_query(involved_company_id))
    if not involved or involved[0].get("company") is None:
        return None

    companies = await client.query("companies", company_query(involved[0]["company"]))
    if not companies:
        return None
    return companies[0].get("name") or None


async def resolve_developer(client, involved_company_ids: Optional[Sequence[int]]) -> Optional[str]:
    """
    Resolve every involved company concurrently and keep one name.

    The winner is the first id in input order whose chain produced a name,
    whatever order the chains finish in. Individual chain errors are
    dropped.

    Returns:
        Company name, or None when there are no ids or no chain found a name

    Raises:
        FatalLookupError: every chain raised
    """
    if not involved_company_ids:
        return None

    results = await asyncio.gather(
        *(resolve_company_name(client, i) for i in involved_company_ids),
        return_exceptions=True,
    )

    errors = []
    for involved_company_id, result in zip(involved_company_ids, results):
        if isinstance(result, BaseException):
            logger.debug(f"Involved company {involved_company_id}: {result}")
            errors.append(result)
        elif result:
            return result

    if len(errors) == len(results):
        raise FatalLookupError(involved_company_ids, errors)
    return None
