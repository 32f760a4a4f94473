import asyncio

from storefront.engine.debounce import Debouncer


def test_only_latest_value_is_delivered():
    delivered = []

    async def scenario():
        debouncer = Debouncer(0.05, delivered.append)
        for value in ["d", "du", "dub"]:
            debouncer.submit(value)
            await asyncio.sleep(0.005)
        assert debouncer.pending
        await asyncio.sleep(0.15)
        assert not debouncer.pending

    asyncio.run(scenario())
    assert delivered == ["dub"]


def test_values_separated_by_quiet_period_are_all_delivered():
    delivered = []

    async def scenario():
        debouncer = Debouncer(0.01, delivered.append)
        debouncer.submit("ba")
        await asyncio.sleep(0.04)
        debouncer.submit("bal")
        await asyncio.sleep(0.04)

    asyncio.run(scenario())
    assert delivered == ["ba", "bal"]


def test_cancel_drops_pending_value():
    delivered = []

    async def scenario():
        debouncer = Debouncer(0.01, delivered.append)
        debouncer.submit("ny")
        debouncer.cancel()
        await asyncio.sleep(0.03)

    asyncio.run(scenario())
    assert delivered == []
