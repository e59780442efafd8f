"""Subjects and bodies of passcode emails and text messages."""

from src.domain.enums import OtpPurpose

_SUBJECTS = {
    OtpPurpose.EMAIL_VERIFICATION: "Verify your email",
    OtpPurpose.PASSWORD_RESET: "Password reset code",
}

_INTROS = {
    OtpPurpose.EMAIL_VERIFICATION: "Use this code to verify your email address:",
    OtpPurpose.PASSWORD_RESET: "Use this code to set a new password:",
}


def otp_subject(purpose: OtpPurpose) -> str:
    return _SUBJECTS[purpose]


def otp_email_body(code: str, purpose: OtpPurpose) -> str:
    return (
        f"{_INTROS[purpose]}\n\n"
        f"    {code}\n\n"
        "The code expires in a few minutes. If you did not request it, "
        "ignore this message.\n"
    )


def otp_sms_text(code: str) -> str:
    return f"Your verification code: {code}"


def redact_email(email: str) -> str:
    """Shorten an address for logs (``ab***@example.com``)."""
    if "@" not in email:
        return "redacted"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"
