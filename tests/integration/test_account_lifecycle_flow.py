"""End-to-end account lifecycle over HTTP.

Real bcrypt, JWT and TOTP adapters and real handlers; only persistence
(in-memory repositories) and delivery (a recording dispatcher) are swapped
in. Passcodes are read from what the dispatcher was asked to send.
"""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from src.application.commands.handlers import (
    CreateRegionHandler,
    DeleteAccountHandler,
    LoginAccountHandler,
    PromoteRoleHandler,
    RefreshAccessTokenHandler,
    RegisterAccountHandler,
    ReissueAccessTokenHandler,
    RequestPasswordResetHandler,
    ResendOtpHandler,
    ResetPasswordHandler,
    UpdateAccountProfileHandler,
    VerifyEmailHandler,
)
from src.application.queries.handlers import (
    GetAccountHandler,
    ListAccountsHandler,
    ListRegionsHandler,
)
from src.core import container
from src.domain.enums import AccountRole, AccountStatus, OtpPurpose
from src.infrastructure.security import BcryptPasswordService
from src.main import app
from tests.conftest import create_account
from tests.utils.fakes import (
    InMemoryAccountRepository,
    InMemoryRegionRepository,
    RecordingDispatcher,
)

PASSWORD = "hello-world"


class Stack:
    """Shared adapters behind every overridden handler factory."""

    def __init__(self):
        self.accounts = InMemoryAccountRepository()
        self.regions = InMemoryRegionRepository()
        self.dispatcher = RecordingDispatcher()
        self.passwords = BcryptPasswordService(cost_factor=4)
        self.tokens = container.get_token_service()
        self.otp = container.get_otp_service()
        self.logger = container.get_logger()

    def install(self):
        handlers = {
            container.get_register_account_handler: lambda: RegisterAccountHandler(
                account_repo=self.accounts,
                region_repo=self.regions,
                password_service=self.passwords,
                otp_service=self.otp,
                notification_dispatcher=self.dispatcher,
                logger=self.logger,
            ),
            container.get_verify_email_handler: lambda: VerifyEmailHandler(
                account_repo=self.accounts, otp_service=self.otp, logger=self.logger
            ),
            container.get_resend_otp_handler: lambda: ResendOtpHandler(
                account_repo=self.accounts,
                otp_service=self.otp,
                notification_dispatcher=self.dispatcher,
                logger=self.logger,
            ),
            container.get_login_account_handler: lambda: LoginAccountHandler(
                account_repo=self.accounts,
                password_service=self.passwords,
                token_service=self.tokens,
                logger=self.logger,
            ),
            container.get_refresh_access_token_handler: lambda: RefreshAccessTokenHandler(
                account_repo=self.accounts, token_service=self.tokens, logger=self.logger
            ),
            container.get_request_password_reset_handler: lambda: RequestPasswordResetHandler(
                account_repo=self.accounts,
                otp_service=self.otp,
                notification_dispatcher=self.dispatcher,
                logger=self.logger,
            ),
            container.get_reset_password_handler: lambda: ResetPasswordHandler(
                account_repo=self.accounts,
                otp_service=self.otp,
                password_service=self.passwords,
                logger=self.logger,
            ),
            container.get_promote_role_handler: lambda: PromoteRoleHandler(
                account_repo=self.accounts, logger=self.logger
            ),
            container.get_update_account_profile_handler: lambda: UpdateAccountProfileHandler(
                account_repo=self.accounts, region_repo=self.regions, logger=self.logger
            ),
            container.get_delete_account_handler: lambda: DeleteAccountHandler(
                account_repo=self.accounts, logger=self.logger
            ),
            container.get_reissue_access_token_handler: lambda: ReissueAccessTokenHandler(
                account_repo=self.accounts, token_service=self.tokens
            ),
            container.get_get_account_handler: lambda: GetAccountHandler(
                account_repo=self.accounts
            ),
            container.get_list_accounts_handler: lambda: ListAccountsHandler(
                account_repo=self.accounts
            ),
            container.get_create_region_handler: lambda: CreateRegionHandler(
                region_repo=self.regions, logger=self.logger
            ),
            container.get_list_regions_handler: lambda: ListRegionsHandler(
                region_repo=self.regions
            ),
        }
        app.dependency_overrides.update(handlers)

    def seed_admin(self, email="admin@example.com"):
        admin = create_account(
            email=email,
            role=AccountRole.ADMIN,
            password_hash=self.passwords.hash_password(PASSWORD),
        )
        self.accounts.add(admin)
        return admin


@pytest.fixture
def stack():
    stack = Stack()
    stack.install()
    yield stack
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


def _register(client, email="aziza@example.com", **extra):
    return client.post(
        "/auth/register",
        json={
            "name": "Aziza Karimova",
            "email": email,
            "password": PASSWORD,
            "phone": "+998901234567",
            **extra,
        },
    )


def _login(client, email, password=PASSWORD):
    return client.post("/auth/login", json={"email": email, "password": password})


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.integration
class TestRegistrationToLogin:
    def test_full_verification_flow(self, client, stack):
        # Register: INACTIVE, passcode sent by email and SMS
        response = _register(client)
        assert response.status_code == 201
        assert response.json()["user_data"]["status"] == "INACTIVE"
        sent = stack.dispatcher.sent[-1]
        assert sent.phone == "+998901234567"
        assert sent.purpose == OtpPurpose.EMAIL_VERIFICATION

        # Login before verification is refused
        response = _login(client, "aziza@example.com")
        assert response.status_code == 401
        assert response.json()["detail"] == "Verify your email first!"

        # Wrong passcode
        code = stack.dispatcher.last_code("aziza@example.com", OtpPurpose.EMAIL_VERIFICATION)
        wrong = "00000" if code != "00000" else "11111"
        response = client.post("/auth/verify", json={"email": "aziza@example.com", "otp": wrong})
        assert response.status_code == 404

        # Right passcode
        response = client.post("/auth/verify", json={"email": "aziza@example.com", "otp": code})
        assert response.status_code == 200

        # Second verification
        response = client.post("/auth/verify", json={"email": "aziza@example.com", "otp": code})
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already verified"

        # Wrong password, then right password
        assert _login(client, "aziza@example.com", "wrong-pass").status_code == 400
        response = _login(client, "aziza@example.com")
        assert response.status_code == 200
        tokens = response.json()

        # Access token opens /user/me
        response = client.get("/user/me", headers=_auth(tokens["access_token"]))
        assert response.status_code == 200
        assert response.json()["status"] == "ACTIVE"

        # Refresh token does not
        response = client.get("/user/me", headers=_auth(tokens["refresh_token"]))
        assert response.status_code == 401

        # Refresh token buys a new access token
        response = client.post(
            "/auth/refresh-token", json={"refresh_token": tokens["refresh_token"]}
        )
        assert response.status_code == 200
        assert client.get(
            "/user/me", headers=_auth(response.json()["access_token"])
        ).status_code == 200

    def test_duplicate_registration_case_insensitive(self, client, stack):
        assert _register(client).status_code == 201

        response = _register(client, email="AZIZA@example.com")

        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists, email exists"

    def test_resend_for_verified_account_sends_nothing(self, client, stack):
        _register(client)
        code = stack.dispatcher.last_code("aziza@example.com", OtpPurpose.EMAIL_VERIFICATION)
        client.post("/auth/verify", json={"email": "aziza@example.com", "otp": code})
        sent_before = len(stack.dispatcher.sent)

        response = client.post("/auth/resend-otp", json={"email": "aziza@example.com"})

        assert response.status_code == 200
        assert len(stack.dispatcher.sent) == sent_before

    def test_admin_cannot_self_register(self, client, stack):
        response = _register(client, role="ADMIN")

        assert response.status_code == 400
        assert stack.dispatcher.sent == []


@pytest.mark.integration
class TestPasswordReset:
    def test_reset_then_login_with_new_password(self, client, stack):
        _register(client)
        code = stack.dispatcher.last_code("aziza@example.com", OtpPurpose.EMAIL_VERIFICATION)
        client.post("/auth/verify", json={"email": "aziza@example.com", "otp": code})

        response = client.post("/password/request-reset", json={"email": "aziza@example.com"})
        assert response.status_code == 200
        reset_sent = stack.dispatcher.sent[-1]
        assert reset_sent.phone is None
        reset_code = reset_sent.code

        response = client.post(
            "/password/reset-password",
            json={"email": "aziza@example.com", "newPassword": "brand-new", "otp": reset_code},
        )
        assert response.status_code == 200

        assert _login(client, "aziza@example.com").status_code == 400
        assert _login(client, "aziza@example.com", "brand-new").status_code == 200

    def test_verification_code_does_not_reset_password(self, client, stack):
        _register(client)
        code = stack.dispatcher.last_code("aziza@example.com", OtpPurpose.EMAIL_VERIFICATION)
        reset_code = stack.otp.generate("aziza@example.com", OtpPurpose.PASSWORD_RESET)
        if code == reset_code:
            pytest.skip("passcodes collided for this window")

        response = client.post(
            "/password/reset-password",
            json={"email": "aziza@example.com", "newPassword": "brand-new", "otp": code},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "OTP is not valid"


@pytest.mark.integration
class TestAdministration:
    def test_promotion_and_gates(self, client, stack):
        stack.seed_admin()
        admin_tokens = _login(client, "admin@example.com").json()
        admin_headers = _auth(admin_tokens["access_token"])

        _register(client)
        code = stack.dispatcher.last_code("aziza@example.com", OtpPurpose.EMAIL_VERIFICATION)
        client.post("/auth/verify", json={"email": "aziza@example.com", "otp": code})
        user_tokens = _login(client, "aziza@example.com").json()
        user_headers = _auth(user_tokens["access_token"])
        user_id = client.get("/user/me", headers=user_headers).json()["id"]
        admin_id = client.get("/user/me", headers=admin_headers).json()["id"]

        # No token, wrong role
        promotion = {"user_id": user_id, "role": "ADMIN"}
        assert client.post("/user/promotion", json=promotion).status_code == 401
        response = client.post("/user/promotion", json=promotion, headers=user_headers)
        assert response.status_code == 403

        # Self promotion
        response = client.post(
            "/user/promotion",
            json={"user_id": admin_id, "role": "SUPER-ADMIN"},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "You cannot promote yourself!"

        # Promotion
        response = client.post("/user/promotion", json=promotion, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["data"]["role"] == "ADMIN"

        # Old access token still carries USER; a reissued one carries ADMIN
        assert client.get("/user", headers=user_headers).status_code == 403
        fresh = client.get("/user/refresh", headers=user_headers).json()["access_token"]
        response = client.get("/user", headers=_auth(fresh))
        assert response.status_code == 200
        assert response.json()["total"] == 2

    def test_regions_and_profile(self, client, stack):
        stack.seed_admin()
        admin_headers = _auth(_login(client, "admin@example.com").json()["access_token"])

        response = client.post("/region", json={"name": "Tashkent"}, headers=admin_headers)
        assert response.status_code == 201
        region_id = response.json()["id"]
        assert client.post(
            "/region", json={"name": "Tashkent"}, headers=admin_headers
        ).status_code == 400
        assert [r["name"] for r in client.get("/region").json()] == ["Tashkent"]

        # CEO registration needs the full profile
        response = _register(client, email="ceo@example.com", role="CEO")
        assert response.status_code == 400
        response = _register(
            client,
            email="ceo@example.com",
            role="CEO",
            image="centers/logo.png",
            year=1985,
            region_id=region_id,
        )
        assert response.status_code == 201
        ceo_id = response.json()["user_data"]["id"]

        # Admin edits the CEO profile; the CEO cannot edit the admin
        response = client.patch(
            f"/user/{ceo_id}", json={"name": "Center Owner"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Center Owner"

        code = stack.dispatcher.last_code("ceo@example.com", OtpPurpose.EMAIL_VERIFICATION)
        client.post("/auth/verify", json={"email": "ceo@example.com", "otp": code})
        ceo_headers = _auth(_login(client, "ceo@example.com").json()["access_token"])
        admin_id = client.get("/user/me", headers=admin_headers).json()["id"]
        response = client.patch(f"/user/{admin_id}", json={"name": "x"}, headers=ceo_headers)
        assert response.status_code == 403

        # CEO deletes self
        response = client.delete(f"/user/{ceo_id}", headers=ceo_headers)
        assert response.status_code == 200
        assert stack.accounts.get(UUID(ceo_id)) is None
        response = client.get(
            "/user",
            params={"role": "CEO", "status": AccountStatus.ACTIVE.value},
            headers=admin_headers,
        )
        assert response.json()["total"] == 0
