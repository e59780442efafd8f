"""Unit tests for TotpService.

Passcodes are a function of (identity, purpose, time window); freezegun
moves the clock across window boundaries.
"""

import pytest
from freezegun import freeze_time

from src.domain.enums import OtpPurpose
from src.infrastructure.security.totp_service import TotpService

SECRET = "otp-secret-for-unit-tests-0123456789"


@pytest.fixture
def otp_service():
    return TotpService(
        SECRET,
        digits=5,
        step_seconds={
            OtpPurpose.EMAIL_VERIFICATION: 600,
            OtpPurpose.PASSWORD_RESET: 300,
        },
        valid_window=1,
    )


@pytest.mark.unit
class TestTotpGenerate:
    def test_code_is_fixed_length_digits(self, otp_service):
        code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)

        assert len(code) == 5
        assert code.isdigit()

    @freeze_time("2026-03-01 10:00:00")
    def test_same_inputs_same_window_same_code(self, otp_service):
        first = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)
        second = otp_service.generate("A@X.com ", OtpPurpose.EMAIL_VERIFICATION)

        assert first == second

    @freeze_time("2026-03-01 10:00:00")
    def test_secret_changes_code(self):
        identity = "a@x.com"
        codes = {
            TotpService(secret).generate(identity, OtpPurpose.EMAIL_VERIFICATION)
            for secret in (SECRET, SECRET + "-other", SECRET + "-third")
        }

        # Collisions are possible in a 5 digit space but not for all three
        assert len(codes) > 1

    def test_blank_identity_rejected(self, otp_service):
        with pytest.raises(ValueError):
            otp_service.generate("  ", OtpPurpose.EMAIL_VERIFICATION)

    def test_unknown_purpose_rejected(self, otp_service):
        with pytest.raises(ValueError):
            otp_service.generate("a@x.com", "login")

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TotpService("")


@pytest.mark.unit
class TestTotpVerify:
    @freeze_time("2026-03-01 10:00:00")
    def test_fresh_code_verifies(self, otp_service):
        code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)

        assert otp_service.verify("a@x.com", OtpPurpose.EMAIL_VERIFICATION, code)

    def test_code_bound_to_purpose(self, otp_service):
        with freeze_time("2026-03-01 10:00:00"):
            code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)
            reset_code = otp_service.generate("a@x.com", OtpPurpose.PASSWORD_RESET)

            if code != reset_code:
                assert not otp_service.verify("a@x.com", OtpPurpose.PASSWORD_RESET, code)

    @freeze_time("2026-03-01 10:00:00")
    def test_code_bound_to_identity(self, otp_service):
        code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)
        other = otp_service.generate("b@x.com", OtpPurpose.EMAIL_VERIFICATION)

        if code != other:
            assert not otp_service.verify("b@x.com", OtpPurpose.EMAIL_VERIFICATION, code)

    def test_adjacent_window_accepted(self, otp_service):
        with freeze_time("2026-03-01 10:00:00"):
            code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)

        with freeze_time("2026-03-01 10:10:30"):
            assert otp_service.verify("a@x.com", OtpPurpose.EMAIL_VERIFICATION, code)

    def test_expired_code_rejected(self, otp_service):
        with freeze_time("2026-03-01 10:00:00"):
            code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)

        with freeze_time("2026-03-01 10:30:00"):
            assert not otp_service.verify("a@x.com", OtpPurpose.EMAIL_VERIFICATION, code)

    def test_reset_window_is_shorter(self, otp_service):
        with freeze_time("2026-03-01 10:00:00"):
            code = otp_service.generate("a@x.com", OtpPurpose.PASSWORD_RESET)

        with freeze_time("2026-03-01 10:12:00"):
            assert not otp_service.verify("a@x.com", OtpPurpose.PASSWORD_RESET, code)

    @pytest.mark.parametrize("candidate", ["", "1234", "123456", "12a45", None])
    def test_malformed_code_rejected(self, otp_service, candidate):
        assert not otp_service.verify("a@x.com", OtpPurpose.EMAIL_VERIFICATION, candidate)

    @freeze_time("2026-03-01 10:00:00")
    def test_surrounding_whitespace_tolerated(self, otp_service):
        code = otp_service.generate("a@x.com", OtpPurpose.EMAIL_VERIFICATION)

        assert otp_service.verify("a@x.com", OtpPurpose.EMAIL_VERIFICATION, f" {code} ")
