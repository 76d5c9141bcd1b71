"""
Integration tests for connected wallet routes.

Usage:
    pytest tests/integration/api/test_wallet_routes.py
"""

from uuid import uuid4

from tests.helpers import BTC_ADDRESS, ETH_ADDRESS, bearer, register


async def _connect(client, headers, address, blockchain, **extra):
    return await client.post(
        "/api/wallets/connect",
        headers=headers,
        json={"walletAddress": address, "blockchain": blockchain, **extra},
    )


class TestWalletRoutes:
    """Integration tests for /api/wallets."""

    async def test_connect_first_wallet_is_primary(self, client):
        headers = bearer((await register(client))["token"])

        response = await _connect(
            client, headers, BTC_ADDRESS, "bitcoin", nickname="cold storage"
        )

        assert response.status_code == 201
        wallet = response.json()["wallet"]
        assert wallet["walletAddress"] == BTC_ADDRESS
        assert wallet["blockchain"] == "bitcoin"
        assert wallet["nickname"] == "cold storage"
        assert wallet["isPrimary"] is True
        assert wallet["lastSync"] is None

    async def test_list_newest_first(self, client):
        headers = bearer((await register(client))["token"])
        await _connect(client, headers, BTC_ADDRESS, "bitcoin")
        await _connect(client, headers, ETH_ADDRESS, "ethereum")

        response = await client.get("/api/wallets", headers=headers)

        wallets = response.json()["wallets"]
        assert [w["walletAddress"] for w in wallets] == [ETH_ADDRESS, BTC_ADDRESS]
        assert [w["isPrimary"] for w in wallets] == [False, True]

    async def test_connect_duplicate(self, client):
        headers = bearer((await register(client))["token"])
        await _connect(client, headers, ETH_ADDRESS, "ethereum")

        response = await _connect(client, headers, ETH_ADDRESS, "ethereum")

        assert response.status_code == 409
        assert response.json()["error"] == "Wallet already connected"

    async def test_connect_invalid_address(self, client):
        headers = bearer((await register(client))["token"])

        response = await _connect(client, headers, ETH_ADDRESS, "bitcoin")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid wallet address"

    async def test_connect_rejects_trailing_newline(self, client):
        headers = bearer((await register(client))["token"])

        response = await _connect(client, headers, ETH_ADDRESS + "\n", "ethereum")
        listed = await client.get("/api/wallets", headers=headers)

        assert response.status_code == 400
        assert listed.json()["wallets"] == []

    async def test_connect_unsupported_chain(self, client):
        headers = bearer((await register(client))["token"])

        response = await _connect(client, headers, ETH_ADDRESS, "solana")

        assert response.status_code == 400

    async def test_set_primary(self, client):
        headers = bearer((await register(client))["token"])
        await _connect(client, headers, BTC_ADDRESS, "bitcoin")
        eth = (await _connect(client, headers, ETH_ADDRESS, "ethereum")).json()

        response = await client.patch(
            f"/api/wallets/{eth['wallet']['id']}/primary", headers=headers
        )
        wallets = (await client.get("/api/wallets", headers=headers)).json()["wallets"]

        assert response.status_code == 200
        assert response.json()["wallet"]["isPrimary"] is True
        assert {w["walletAddress"]: w["isPrimary"] for w in wallets} == {
            ETH_ADDRESS: True,
            BTC_ADDRESS: False,
        }

    async def test_disconnect_primary_promotes_remaining(self, client):
        headers = bearer((await register(client))["token"])
        btc = (await _connect(client, headers, BTC_ADDRESS, "bitcoin")).json()
        await _connect(client, headers, ETH_ADDRESS, "ethereum")

        response = await client.delete(
            f"/api/wallets/{btc['wallet']['id']}", headers=headers
        )
        wallets = (await client.get("/api/wallets", headers=headers)).json()["wallets"]

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert len(wallets) == 1
        assert wallets[0]["walletAddress"] == ETH_ADDRESS
        assert wallets[0]["isPrimary"] is True

    async def test_other_users_wallet_is_not_found(self, client):
        owner = bearer((await register(client, email="owner@b.io"))["token"])
        stranger = bearer((await register(client, email="stranger@b.io"))["token"])
        wallet = (await _connect(client, owner, ETH_ADDRESS, "ethereum")).json()

        delete = await client.delete(
            f"/api/wallets/{wallet['wallet']['id']}", headers=stranger
        )
        primary = await client.patch(
            f"/api/wallets/{wallet['wallet']['id']}/primary", headers=stranger
        )

        assert delete.status_code == 404
        assert primary.status_code == 404

    async def test_disconnect_unknown(self, client):
        headers = bearer((await register(client))["token"])

        response = await client.delete(f"/api/wallets/{uuid4()}", headers=headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Wallet not found", "code": "ENTITY_NOT_FOUND"}
