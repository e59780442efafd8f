"""API tests for password reset endpoints.

- POST /password/request-reset
- POST /password/reset-password
"""

import pytest

from src.core.container import (
    get_request_password_reset_handler,
    get_reset_password_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, NotFoundError
from src.core.result import Failure, Success
from tests.conftest import create_account
from tests.utils.stubs import StubHandler


@pytest.mark.api
class TestRequestReset:
    def test_request_reset_message_names_account(self, client, override):
        account = create_account(name="Aziza", email="aziza@example.com")
        override(get_request_password_reset_handler, StubHandler(Success(value=account)))

        response = client.post("/password/request-reset", json={"email": account.email})

        assert response.status_code == 200
        assert response.json()["message"] == (
            "Aziza, an OTP has been sent to your email (aziza@example.com). "
            "Please check and confirm it!"
        )

    def test_request_reset_unknown_email(self, client, override):
        override(
            get_request_password_reset_handler,
            StubHandler(
                Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message="User not found",
                        resource_type="Account",
                        resource_id="nobody@example.com",
                    )
                )
            ),
        )

        response = client.post(
            "/password/request-reset", json={"email": "nobody@example.com"}
        )

        assert response.status_code == 404

    def test_request_reset_invalid_email(self, client, override):
        stub = override(
            get_request_password_reset_handler, StubHandler(Success(value=create_account()))
        )

        response = client.post("/password/request-reset", json={"email": "nope"})

        assert response.status_code == 400
        assert stub.commands == []


@pytest.mark.api
class TestResetPassword:
    def test_reset_accepts_camel_case_field(self, client, override):
        stub = override(get_reset_password_handler, StubHandler(Success(value=create_account())))

        response = client.post(
            "/password/reset-password",
            json={"email": "aziza@example.com", "newPassword": "new-secret", "otp": "24680"},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "New password set successfully"}
        assert stub.last_command.new_password == "new-secret"
        assert stub.last_command.otp == "24680"

    def test_reset_wrong_passcode_400(self, client, override):
        override(
            get_reset_password_handler,
            StubHandler(
                Failure(
                    error=AuthenticationError(
                        code=ErrorCode.INVALID_OTP, message="OTP is not valid"
                    )
                )
            ),
        )

        response = client.post(
            "/password/reset-password",
            json={"email": "aziza@example.com", "newPassword": "new-secret", "otp": "11111"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "OTP is not valid"

    def test_reset_missing_new_password_400(self, client, override):
        override(get_reset_password_handler, StubHandler(Success(value=create_account())))

        response = client.post(
            "/password/reset-password",
            json={"email": "aziza@example.com", "otp": "11111"},
        )

        assert response.status_code == 400

    def test_reset_multibyte_password_over_72_bytes_400(self, client, override):
        stub = override(
            get_reset_password_handler, StubHandler(Success(value=create_account()))
        )

        response = client.post(
            "/password/reset-password",
            json={
                "email": "aziza@example.com",
                "newPassword": "\u00e9" * 40,
                "otp": "24680",
            },
        )

        assert response.status_code == 400
        assert "72 bytes" in response.json()["errors"][0]["message"]
        assert stub.commands == []
