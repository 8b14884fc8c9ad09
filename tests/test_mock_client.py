from decimal import Decimal

import pytest

from spike_api import (
    ApiError,
    CreateChargeRequest,
    CreateTokenRequest,
    InvalidArgumentsError,
    MockSpikeClient,
    Product,
    SpikeGateway,
)


async def _token(client: MockSpikeClient) -> str:
    result = await client.create_token(
        CreateTokenRequest(card_number=4444333322221111, exp_month=1, exp_year=2030, cvc="012", name="Taro Spike")
    )
    return result.unwrap()["id"]


async def _charge(client: MockSpikeClient, **overrides) -> dict:
    fields = {"currency": "JPY", "amount": 1080, "card": await _token(client)}
    fields.update(overrides)
    return (await client.create_charge(CreateChargeRequest(**fields))).unwrap()


def test_mock_implements_gateway_interface():
    assert isinstance(MockSpikeClient(), SpikeGateway)


@pytest.mark.asyncio
async def test_token_keeps_only_last_four_digits():
    client = MockSpikeClient()
    token_id = await _token(client)

    result = await client.get_token(token_id)

    assert result.status_code == 200
    assert result.body["id"].startswith("tok_")
    assert result.body["source"]["last4"] == "1111"
    assert "4444333322221111" not in str(result.body)


@pytest.mark.asyncio
async def test_create_charge_returns_created_charge():
    client = MockSpikeClient()
    token_id = await _token(client)

    result = await client.create_charge(
        CreateChargeRequest(currency="JPY", amount=1080, card=token_id, products=[Product(id="item-1", price=1000)])
    )

    assert result.status_code == 201
    assert result.body["id"].startswith("ch_")
    assert result.body["amount"] == 1080
    assert result.body["currency"] == "JPY"
    assert result.body["captured"] is True
    assert result.body["products"][0]["id"] == "item-1"


@pytest.mark.asyncio
async def test_create_charge_with_unknown_token_is_an_api_error():
    client = MockSpikeClient()

    error, body = await client.create_charge(CreateChargeRequest(currency="JPY", amount=1080, card="tok_nope"))

    assert isinstance(error, ApiError)
    assert error.message == "400 Bad Request"
    assert error.error_type == "invalid_request_error"
    assert body["error"]["param"] == "card"


@pytest.mark.asyncio
async def test_refund_after_create_carries_original_amount():
    client = MockSpikeClient()
    charge = await _charge(client)

    error, body = await client.refund_charge(charge["id"])

    assert error is None
    assert body["refunded"] is True
    assert body["refunds"][0]["amount"] == charge["amount"]


@pytest.mark.asyncio
async def test_refund_twice_is_rejected():
    client = MockSpikeClient()
    charge = await _charge(client)
    await client.refund_charge(charge["id"])

    result = await client.refund_charge(charge["id"])

    assert isinstance(result.error, ApiError)
    assert result.status_code == 400


@pytest.mark.asyncio
async def test_capture_authorized_charge_once():
    client = MockSpikeClient()
    charge = await _charge(client, capture=False)
    assert charge["captured"] is False

    first = await client.capture_charge(charge["id"])
    second = await client.capture_charge(charge["id"])

    assert first.body["captured"] is True
    assert isinstance(second.error, ApiError)


@pytest.mark.asyncio
async def test_unknown_charge_is_not_found():
    client = MockSpikeClient()

    error, body = await client.get_charge("ch_missing")

    assert isinstance(error, ApiError)
    assert error.status_code == 404
    assert error.message == "404 Not Found"
    assert body["error"]["type"] == "invalid_request_error"


@pytest.mark.asyncio
async def test_list_charges_is_newest_first_and_limited():
    client = MockSpikeClient()
    created = [await _charge(client, amount=amount) for amount in (100, 200, 300)]

    result = await client.list_charges(2)

    assert [c["id"] for c in result.body["data"]] == [created[2]["id"], created[1]["id"]]
    assert result.body["has_more"] is True


@pytest.mark.asyncio
async def test_returned_bodies_do_not_alias_stored_state():
    client = MockSpikeClient()
    charge = await _charge(client)
    charge["amount"] = 0

    stored = (await client.get_charge(charge["id"])).body

    assert stored["amount"] == 1080


@pytest.mark.asyncio
async def test_mock_validates_like_the_real_client():
    client = MockSpikeClient()

    result = await client.create_charge(CreateChargeRequest(currency="JPY", amount=None, card="tok_x"))

    assert isinstance(result.error, InvalidArgumentsError)
    assert result.error.problems == ["amount is required"]


@pytest.mark.asyncio
async def test_mock_rejects_non_request_objects():
    client = MockSpikeClient()

    charge = await client.create_charge({"currency": "JPY", "amount": 1080})
    token = await client.create_token(None)

    assert charge.error.problems == ["request must be CreateChargeRequest, got dict"]
    assert token.error.problems == ["request must be CreateTokenRequest, got NoneType"]


@pytest.mark.asyncio
async def test_mock_rejects_line_items_that_cannot_be_encoded():
    client = MockSpikeClient()
    token_id = await _token(client)

    result = await client.create_charge(
        CreateChargeRequest(currency="JPY", amount=1080, card=token_id, products=[Product(price=Decimal("1000"))])
    )

    assert isinstance(result.error, InvalidArgumentsError)
    assert result.error.problems == ["products[0] is not JSON serializable"]
    assert (await client.list_charges()).body["data"] == []


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, -1])
async def test_list_charges_rejects_limit_below_one(limit):
    client = MockSpikeClient()
    await _charge(client)

    result = await client.list_charges(limit)

    assert isinstance(result.error, ApiError)
    assert result.status_code == 400
    assert result.body["error"]["param"] == "limit"
