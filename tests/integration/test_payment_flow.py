"""End-to-end API flows: configure a manager, fund a payer, quote and apply payments.

Uses the client fixture from tests/conftest.py (fresh in-memory SQLite per test).
"""

from httpx import AsyncClient
from solders.pubkey import Pubkey  # type: ignore

from src.pm_payment.infrastructure.metadata_verifier import find_metadata_address

METADATA_PROGRAM = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
LAMPORTS_PER_SOL = 1_000_000_000


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _create_manager(client: AsyncClient, **overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "name": "market",
        "authority": "admin",
        "fee_collector": "collector",
        "maker_fee_bps": 500,
        "taker_fee_bps": 300,
        "include_seller_fee": True,
        "royalty_fee_share": 4500,
    }
    body.update(overrides)
    resp = await client.post("/api/v1/payment-managers", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


async def _deposit(client: AsyncClient, identity: str, amount: int) -> None:
    resp = await client.post(
        "/api/v1/ledger/deposit", json={"identity": identity, "amount_lamports": amount}
    )
    assert resp.status_code == 200, resp.text


async def _balance(client: AsyncClient, identity: str) -> int:
    resp = await client.get(f"/api/v1/ledger/accounts/{identity}")
    if resp.status_code == 404:
        return 0
    return int(resp.json()["data"]["balance_lamports"])


def _royalty_payment(mint: str) -> dict[str, object]:
    return {
        "payment_manager": "market",
        "amount_lamports": LAMPORTS_PER_SOL,
        "payer": "payer",
        "payment_target": "seller",
        "fee_collector": "collector",
        "mint": mint,
        "mint_metadata": {
            "address": find_metadata_address(mint, METADATA_PROGRAM),
            "owner": METADATA_PROGRAM,
            "data": {
                "mint": mint,
                "seller_fee_bps": 100,
                "creators": [
                    {"address": "c0", "share": 0},
                    {"address": "c1", "share": 15},
                    {"address": "c2", "share": 30},
                    {"address": "c3", "share": 55},
                ],
            },
        },
        "buy_side_recipient": "broker",
        "creator_recipients": ["r1", "r2", "r3"],
    }


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestPaymentManagerLifecycle:
    async def test_create_get_update_close(self, client: AsyncClient) -> None:
        created = await _create_manager(client)
        assert created["royalty_fee_share"] == 4500

        resp = await client.get("/api/v1/payment-managers/market")
        assert resp.json()["data"]["maker_fee_bps"] == 500

        resp = await client.patch(
            "/api/v1/payment-managers/market", json={"caller": "admin", "maker_fee_bps": 250}
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["maker_fee_bps"] == 250

        resp = await client.delete("/api/v1/payment-managers/market", params={"caller": "admin"})
        assert resp.status_code == 200

        resp = await client.get("/api/v1/payment-managers/market")
        assert resp.status_code == 404
        assert resp.json()["code"] == 1002

    async def test_duplicate_name(self, client: AsyncClient) -> None:
        await _create_manager(client)
        resp = await client.post(
            "/api/v1/payment-managers",
            json={
                "name": "market",
                "authority": "other",
                "fee_collector": "collector",
                "maker_fee_bps": 0,
                "taker_fee_bps": 0,
            },
        )
        assert resp.status_code == 409
        assert resp.json()["code"] == 1001

    async def test_update_by_non_authority(self, client: AsyncClient) -> None:
        await _create_manager(client)
        resp = await client.patch(
            "/api/v1/payment-managers/market", json={"caller": "mallory", "taker_fee_bps": 0}
        )
        assert resp.status_code == 403

    async def test_invalid_basis_points(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/payment-managers",
            json={
                "name": "bad",
                "authority": "admin",
                "fee_collector": "collector",
                "maker_fee_bps": 20_000,
                "taker_fee_bps": 0,
            },
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 1004


class TestRoyaltyPayment:
    async def test_quote_does_not_move_funds(self, client: AsyncClient) -> None:
        await _create_manager(client)
        mint = str(Pubkey.new_unique())

        resp = await client.post("/api/v1/payments/quote", json=_royalty_payment(mint))

        assert resp.status_code == 200, resp.text
        data = resp.json()["data"]
        assert data["total_creators_fee"] == 46_000_000
        assert data["fee_collector_amount"] == 44_000_000
        assert data["target_amount"] == 935_000_000
        assert data["total_debit_lamports"] == 1_030_000_000
        assert await _balance(client, "seller") == 0

    async def test_apply_settles_every_party(self, client: AsyncClient) -> None:
        await _create_manager(client)
        await _deposit(client, "payer", 2 * LAMPORTS_PER_SOL)
        mint = str(Pubkey.new_unique())

        resp = await client.post("/api/v1/payments/apply", json=_royalty_payment(mint))

        assert resp.status_code == 200, resp.text
        assert resp.json()["data"]["payment_id"].startswith("pay_")
        assert await _balance(client, "r1") == 6_900_000
        assert await _balance(client, "r2") == 13_800_000
        assert await _balance(client, "r3") == 25_300_000
        assert await _balance(client, "broker") == 5_000_000
        assert await _balance(client, "collector") == 44_000_000
        assert await _balance(client, "seller") == 935_000_000
        assert await _balance(client, "payer") == 2 * LAMPORTS_PER_SOL - 1_030_000_000

    async def test_underfunded_payer_moves_nothing(self, client: AsyncClient) -> None:
        await _create_manager(client)
        await _deposit(client, "payer", 50_000_000)
        mint = str(Pubkey.new_unique())

        resp = await client.post("/api/v1/payments/apply", json=_royalty_payment(mint))

        assert resp.status_code == 422
        assert resp.json()["code"] == 5001
        assert await _balance(client, "payer") == 50_000_000
        assert await _balance(client, "r1") == 0

    async def test_foreign_metadata_owner_rejected(self, client: AsyncClient) -> None:
        await _create_manager(client)
        await _deposit(client, "payer", 2 * LAMPORTS_PER_SOL)
        mint = str(Pubkey.new_unique())
        body = _royalty_payment(mint)
        body["mint_metadata"]["owner"] = str(Pubkey.new_unique())  # type: ignore[index]

        resp = await client.post("/api/v1/payments/apply", json=body)

        assert resp.status_code == 422
        assert resp.json()["code"] == 3001
        assert await _balance(client, "payer") == 2 * LAMPORTS_PER_SOL

    async def test_missing_creator_recipient(self, client: AsyncClient) -> None:
        await _create_manager(client)
        await _deposit(client, "payer", 2 * LAMPORTS_PER_SOL)
        mint = str(Pubkey.new_unique())
        body = _royalty_payment(mint)
        body["creator_recipients"] = ["r1", "r2"]

        resp = await client.post("/api/v1/payments/apply", json=body)

        assert resp.status_code == 422
        assert resp.json()["code"] == 4001

    async def test_wrong_fee_collector(self, client: AsyncClient) -> None:
        await _create_manager(client)
        mint = str(Pubkey.new_unique())
        body = _royalty_payment(mint)
        body["fee_collector"] = "intruder"

        resp = await client.post("/api/v1/payments/quote", json=body)

        assert resp.status_code == 422
        assert resp.json()["code"] == 1005


class TestLedgerApi:
    async def test_unknown_account(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/ledger/accounts/ghost")
        assert resp.status_code == 404
        assert resp.json()["code"] == 4002

    async def test_deposit_lists_entries(self, client: AsyncClient) -> None:
        await _deposit(client, "alice", LAMPORTS_PER_SOL)
        resp = await client.get("/api/v1/ledger/accounts/alice")
        data = resp.json()["data"]
        assert data["balance_display"] == "1.000000000 SOL"
        assert data["entries"][0]["entry_type"] == "DEPOSIT"
