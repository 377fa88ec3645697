"""Tests for the domain endpoint wrappers.

Each wrapper is checked through a real gateway against the fake server, so
method, path, body and query are observed on the wire.
"""

import json

import pytest

from adapters.endpoints import AuthApi, HealthApi, ImportApi, SharingApi, TwoFactorApi, VaultApi
from adapters.endpoints.base import segment
from core.domain.errors import MalformedResponseError
from core.domain.models import Credentials, VaultItem, VaultItemInput


def body(request):
    return json.loads(request.content)


class TestAuthApi:
    @pytest.mark.asyncio
    async def test_login_parses_token_and_user(self, gateway, server):
        server.add(
            "POST",
            "/auth/login",
            json={
                "access_token": "tok1",
                "token_type": "Bearer",
                "user": {"id": "u1", "email": "a@b.c", "two_factor_enabled": True},
            },
        )

        response = await AuthApi(gateway).login(Credentials(email="a@b.c", master_password="pw"))

        assert response.access_token == "tok1"
        assert response.user.email == "a@b.c"
        assert response.user.two_factor_enabled is True
        assert body(server.last) == {"email": "a@b.c", "master_password": "pw"}

    @pytest.mark.asyncio
    async def test_login_without_token_is_malformed(self, gateway, server):
        server.add("POST", "/auth/login", json={"user": {}})

        with pytest.raises(MalformedResponseError):
            await AuthApi(gateway).login(Credentials(email="a@b.c", master_password="pw"))

    @pytest.mark.asyncio
    async def test_get_profile_uses_me_endpoint(self, gateway, server):
        server.add("GET", "/auth/me", json={"id": "u1", "email": "a@b.c"})

        profile = await AuthApi(gateway).get_profile()

        assert profile.id == "u1"
        assert server.last.url.path == "/api/v1/auth/me"

    @pytest.mark.asyncio
    async def test_request_deletion(self, gateway, server):
        server.add("POST", "/auth/request-deletion", json={"message": "sent"})

        await AuthApi(gateway).request_deletion("a@b.c")

        assert body(server.last) == {"email": "a@b.c"}


class TestVaultApi:
    @pytest.mark.asyncio
    async def test_list_items(self, gateway, server):
        server.add(
            "GET",
            "/vault",
            json=[
                {"id": "1", "title": "mail", "favorite": True, "created_at": "2024-01-01T00:00:00Z"},
                {"id": "2", "title": "bank"},
            ],
        )

        items = await VaultApi(gateway).list_items()

        assert [i.id for i in items] == ["1", "2"]
        assert items[0].favorite is True

    @pytest.mark.asyncio
    async def test_list_rejects_non_list(self, gateway, server):
        server.add("GET", "/vault", json={"items": []})

        with pytest.raises(MalformedResponseError):
            await VaultApi(gateway).list_items()

    @pytest.mark.asyncio
    async def test_get_sends_master_password_as_query(self, gateway, server):
        server.add("GET", "/vault/1", json={"id": "1", "title": "mail", "password": "s3cret"})

        secret = await VaultApi(gateway).get("1", "master")

        assert secret.password == "s3cret"
        assert server.last.url.params["master_password"] == "master"

    @pytest.mark.asyncio
    async def test_create_and_update_send_full_record(self, gateway, server):
        server.add("POST", "/vault", json={"id": "9", "title": "mail"})
        server.add("PUT", "/vault/9", json={"id": "9", "title": "mail2"})
        api = VaultApi(gateway)
        data = VaultItemInput(title="mail", password="pw", master_password="m")

        created = await api.create(data)
        assert created == VaultItem(id="9", title="mail")
        assert body(server.last)["password"] == "pw"

        updated = await api.update("9", data.model_copy(update={"title": "mail2"}))
        assert updated.title == "mail2"
        assert server.last.method == "PUT"

    @pytest.mark.asyncio
    async def test_delete(self, gateway, server):
        server.add("DELETE", "/vault/9", json={"message": "Vault entry deleted successfully"})

        await VaultApi(gateway).delete("9")

        assert server.last.method == "DELETE"

    def test_path_segments_are_quoted(self):
        assert segment("a/b c") == "a%2Fb%20c"
        assert segment("3f2a-11") == "3f2a-11"

    @pytest.mark.asyncio
    async def test_generate_password_query(self, gateway, server):
        server.add("POST", "/vault/generate-password", json={"password": "Zx!9"})

        password = await VaultApi(gateway).generate_password(length=32, use_special=False)

        assert password == "Zx!9"
        assert server.last.url.query == b"length=32&use_special=false"

    @pytest.mark.asyncio
    async def test_scan_all(self, gateway, server):
        server.add("POST", "/vault/scan-all", json={"scanned": 2})

        assert await VaultApi(gateway).scan_all() == {"scanned": 2}


class TestOtherApis:
    @pytest.mark.asyncio
    async def test_health(self, gateway, server):
        server.add("GET", "/health/report", json={"score": 80})
        server.add("POST", "/health/analyze", json={"strength": "weak"})
        server.add("POST", "/password/check-breach", json={"breached": False})
        api = HealthApi(gateway)

        assert await api.get_report() == {"score": 80}
        await api.analyze_password("pw")
        assert body(server.last) == {"password": "pw"}
        assert await api.check_breach("pw") == {"breached": False}

    @pytest.mark.asyncio
    async def test_sharing(self, gateway, server):
        server.add("POST", "/share", json={"token": "t1"})
        server.add("GET", "/shared", json=[])
        server.add("GET", "/shared/t1", json={"password": "pw"})
        server.add("POST", "/shared/t1/revoke", json={"message": "revoked"})
        api = SharingApi(gateway)

        await api.share("v1", "bob@example.com", expires_in_hours=24)
        assert body(server.last) == {
            "vault_id": "v1",
            "recipient_email": "bob@example.com",
            "expires_in_hours": 24,
        }
        assert await api.list_shares() == []

        await api.get_shared_password("t1")
        assert server.last.url.query == b""
        await api.get_shared_password("t1", share_password="open")
        assert server.last.url.params["share_password"] == "open"

        await api.revoke_share("t1")
        assert server.last.url.path == "/api/v1/shared/t1/revoke"

    @pytest.mark.asyncio
    async def test_two_factor(self, gateway, server):
        for path in ("enable", "verify-and-enable", "verify", "disable"):
            server.add("POST", f"/2fa/{path}", json={"ok": True})
        api = TwoFactorApi(gateway)

        await api.enable("m")
        assert body(server.last) == {"master_password": "m"}
        await api.verify_and_enable("123456")
        assert body(server.last) == {"token": "123456"}
        await api.verify("123456")
        assert server.last.url.path == "/api/v1/2fa/verify"
        await api.disable("m")
        assert body(server.last) == {"master_password": "m"}

    @pytest.mark.asyncio
    async def test_import(self, gateway, server):
        server.add("GET", "/import/supported-formats", json=["bitwarden", "lastpass"])
        server.add("POST", "/import/upload", json={"session_id": "s1"})
        server.add("POST", "/import/confirm/s1", json={"imported": 3})
        api = ImportApi(gateway)

        assert await api.supported_formats() == ["bitwarden", "lastpass"]
        await api.upload("a,b", "export.csv", "lastpass")
        assert body(server.last) == {"content": "a,b", "filename": "export.csv", "source": "lastpass"}
        assert await api.confirm("s1", "m") == {"imported": 3}
        assert body(server.last) == {"master_password": "m", "merge_strategy": "skip"}
