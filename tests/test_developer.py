import asyncio

import pytest

from games.errors import FatalLookupError, IGDBRequestError
from games.resolvers import resolve_developer
from tests.fakes import FakeIGDBClient, query_id


def company_names(body):
    return [{"id": query_id(body), "name": f"Company {query_id(body)}"}]


def test_first_successful_id_in_input_order_wins():
    def involved(body):
        involved_id = query_id(body)
        if involved_id == 101:
            raise IGDBRequestError("involved_companies", 500)
        return [{"id": involved_id, "company": involved_id + 1000}]

    client = FakeIGDBClient({"involved_companies": involved, "companies": company_names})

    assert asyncio.run(resolve_developer(client, [101, 102])) == "Company 1102"


def test_winner_is_independent_of_completion_order():
    async def involved(body):
        involved_id = query_id(body)
        if involved_id == 101:
            await asyncio.sleep(0.05)
        return [{"id": involved_id, "company": involved_id + 1000}]

    client = FakeIGDBClient({"involved_companies": involved, "companies": company_names})

    assert asyncio.run(resolve_developer(client, [101, 102])) == "Company 1101"
    # The faster chain for 102 finished first
    assert query_id(client.bodies("companies")[0]) == 1102


def test_chains_run_concurrently():
    started = []

    async def scenario():
        both_started = asyncio.Event()

        async def involved(body):
            started.append(query_id(body))
            if len(started) == 2:
                both_started.set()
            await asyncio.wait_for(both_started.wait(), timeout=1)
            return [{"id": query_id(body), "company": 5}]

        client = FakeIGDBClient({"involved_companies": involved, "companies": company_names})
        return await resolve_developer(client, [1, 2])

    assert asyncio.run(scenario()) == "Company 5"
    assert sorted(started) == [1, 2]


def test_every_chain_failing_is_fatal():
    def involved(body):
        raise IGDBRequestError("involved_companies", 0, "connection reset")

    client = FakeIGDBClient({"involved_companies": involved})

    with pytest.raises(FatalLookupError) as excinfo:
        asyncio.run(resolve_developer(client, [1, 2]))
    assert excinfo.value.involved_company_ids == [1, 2]
    assert len(excinfo.value.errors) == 2


def test_no_names_found_is_absent_not_fatal():
    client = FakeIGDBClient({
        "involved_companies": lambda body: [{"id": query_id(body), "company": 9}],
        "companies": lambda body: [],
    })

    assert asyncio.run(resolve_developer(client, [1])) is None


def test_no_involved_companies_means_no_request():
    client = FakeIGDBClient()

    assert asyncio.run(resolve_developer(client, [])) is None
    assert asyncio.run(resolve_developer(client, None)) is None
    assert client.calls == []


def test_cancelled_chain_does_not_shadow_later_success():
    def involved(body):
        if query_id(body) == 1:
            raise asyncio.CancelledError()
        return [{"id": query_id(body), "company": 2002}]

    client = FakeIGDBClient({"involved_companies": involved, "companies": company_names})

    assert asyncio.run(resolve_developer(client, [1, 2])) == "Company 2002"


def test_every_chain_cancelled_is_fatal():
    def involved(body):
        raise asyncio.CancelledError()

    client = FakeIGDBClient({"involved_companies": involved})

    with pytest.raises(FatalLookupError):
        asyncio.run(resolve_developer(client, [1, 2]))
