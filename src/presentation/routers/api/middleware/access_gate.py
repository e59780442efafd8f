"""Request access gate.

Every protected request walks an ordered pipeline of gate functions:

    ANONYMOUS -> TOKEN_PRESENT -> TOKEN_VALID -> ROLE_AUTHORIZED -> ALLOWED

Each gate takes the current ``GateContext`` and returns either an advanced
context or a ``GateRejection``. The pipeline stops at the first rejection,
and each gate refuses a context that has not reached its precondition
stage, so a handler can never run with a token that was present but not
verified.

Usage:
    result = run_gates(
        GateContext(authorization=request.headers.get("Authorization")),
        [
            extract_bearer_token,
            verify_access_token(token_service),
            authorize_roles([AccountRole.ADMIN]),
        ],
    )
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum

from fastapi import status

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import AccountRole
from src.domain.protocols import TokenIssuerProtocol
from src.domain.value_objects import TokenClaims

TOKEN_NOT_PROVIDED = "Token not provided"


class GateStage(str, Enum):
    """Checkpoints a request passes on its way to a handler."""

    ANONYMOUS = "anonymous"
    TOKEN_PRESENT = "token_present"
    TOKEN_VALID = "token_valid"
    ROLE_AUTHORIZED = "role_authorized"
    ALLOWED = "allowed"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True, kw_only=True)
class GateContext:
    """State carried through the gate pipeline.

    Attributes:
        authorization: Raw Authorization header value.
        stage: Last checkpoint passed.
        token: Bearer token, once extracted.
        claims: Verified claims, once the token is verified.
    """

    authorization: str | None
    stage: GateStage = GateStage.ANONYMOUS
    token: str | None = None
    claims: TokenClaims | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GateRejection:
    """Why a request was stopped.

    Attributes:
        status_code: 401 for missing or bad tokens, 403 for a role mismatch.
        code: Machine-readable error code.
        message: Client-facing message.
        stage: Checkpoint the request had reached when it was rejected.
    """

    status_code: int
    code: ErrorCode
    message: str
    stage: GateStage


Gate = Callable[[GateContext], Result[GateContext, GateRejection]]


def _require_stage(context: GateContext, expected: GateStage, gate: str) -> None:
    if context.stage != expected:
        raise RuntimeError(
            f"{gate} requires stage {expected.value}, got {context.stage.value}"
        )


def extract_bearer_token(context: GateContext) -> Result[GateContext, GateRejection]:
    """ANONYMOUS -> TOKEN_PRESENT: pull the token out of ``Bearer <token>``."""
    _require_stage(context, GateStage.ANONYMOUS, "extract_bearer_token")

    scheme, _, token = (context.authorization or "").strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return Failure(
            error=GateRejection(
                status_code=status.HTTP_401_UNAUTHORIZED,
                code=ErrorCode.TOKEN_MISSING,
                message=TOKEN_NOT_PROVIDED,
                stage=context.stage,
            )
        )
    return Success(value=replace(context, stage=GateStage.TOKEN_PRESENT, token=token))


def verify_access_token(token_service: TokenIssuerProtocol) -> Gate:
    """TOKEN_PRESENT -> TOKEN_VALID: verify signature, expiry and token class."""

    def gate(context: GateContext) -> Result[GateContext, GateRejection]:
        _require_stage(context, GateStage.TOKEN_PRESENT, "verify_access_token")
        assert context.token is not None

        match token_service.verify_access(context.token):
            case Failure(error=error):
                return Failure(
                    error=GateRejection(
                        status_code=status.HTTP_401_UNAUTHORIZED,
                        code=error.code,
                        message=error.message,
                        stage=context.stage,
                    )
                )
            case Success(value=claims):
                return Success(
                    value=replace(context, stage=GateStage.TOKEN_VALID, claims=claims)
                )

    return gate


def authorize_roles(roles: Iterable[AccountRole] = ()) -> Gate:
    """TOKEN_VALID -> ROLE_AUTHORIZED: check the role claim.

    Args:
        roles: Allowed roles, in the order they are named in the error
            message. Empty means any authenticated role.
    """
    allowed: Sequence[AccountRole] = tuple(roles)

    def gate(context: GateContext) -> Result[GateContext, GateRejection]:
        _require_stage(context, GateStage.TOKEN_VALID, "authorize_roles")
        assert context.claims is not None

        role = context.claims.role
        if allowed and role not in allowed:
            return Failure(
                error=GateRejection(
                    status_code=status.HTTP_403_FORBIDDEN,
                    code=ErrorCode.PERMISSION_DENIED,
                    message=(
                        f"Not allowed for {role.value}, only for "
                        f"{', '.join(r.value for r in allowed)}"
                    ),
                    stage=context.stage,
                )
            )
        return Success(value=replace(context, stage=GateStage.ROLE_AUTHORIZED))

    return gate


def run_gates(
    context: GateContext, gates: Iterable[Gate]
) -> Result[GateContext, GateRejection]:
    """Run gates in order; the first rejection ends the pipeline.

    Returns:
        Success(GateContext) at stage ALLOWED, or Failure(GateRejection).
    """
    for gate in gates:
        match gate(context):
            case Failure(error=rejection):
                return Failure(error=rejection)
            case Success(value=advanced):
                context = advanced

    return Success(value=replace(context, stage=GateStage.ALLOWED))
