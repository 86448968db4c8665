"""Tests for the Signal (no payload) and Channel (payload) relays."""

import pytest

from nanorelay.relay import Channel, Signal


class TestSignal:
    def test_listener_called_without_payload(self):
        relay = Signal()
        calls = []
        relay.add_listener(lambda: calls.append("fired"))

        relay.dispatch()

        assert calls == ["fired"]

    @pytest.mark.asyncio
    async def test_waiter_resolves_to_none(self):
        relay = Signal()
        fut = relay.next()
        relay.dispatch()
        assert await fut is None

    def test_dispatch_rejects_payload(self):
        with pytest.raises(TypeError):
            Signal().dispatch(1)


class TestChannel:
    def test_none_is_passed_through(self):
        relay = Channel()
        calls = []
        relay.add_listener(calls.append)

        relay.dispatch(None)

        assert calls == [None]

    @pytest.mark.asyncio
    async def test_waiter_receives_none_payload(self):
        relay = Channel()
        fut = relay.next()
        relay.dispatch(None)
        assert fut.done()
        assert await fut is None

    def test_dispatch_requires_payload(self):
        with pytest.raises(TypeError):
            Channel().dispatch()
