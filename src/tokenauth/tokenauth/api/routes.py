# ABOUTME: HTTP routes for login, registration, token refresh and ping
# ABOUTME: Thin adapters: each route calls one component and unwraps its AuthResult

from fastapi import APIRouter, Depends

from tokenauth.api.dependencies import get_gate, get_refresh_token_manager, require_identity
from tokenauth.api.schemas import LoginRequest, MessageResponse, RefreshTokenRequest, RegisterRequest
from tokenauth.components.auth.authentication_gate import AuthenticationGate
from tokenauth.components.auth.refresh_token_manager import RefreshTokenManager
from tokenauth.models.auth.identity import Identity
from tokenauth.models.auth.refresh_token import TokenPair

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
    responses={401: {"model": MessageResponse}, 503: {"model": MessageResponse}},
)


@router.post("/login", status_code=201, response_model=TokenPair)
async def login(body: LoginRequest, gate: AuthenticationGate = Depends(get_gate)) -> TokenPair:
    result = await gate.login(body.username, body.password)
    return result.unwrap()


@router.post("/register", status_code=201, response_model=Identity, responses={409: {"model": MessageResponse}})
async def register(body: RegisterRequest, gate: AuthenticationGate = Depends(get_gate)) -> Identity:
    result = await gate.register(body.name, body.username, body.password)
    return result.unwrap()


@router.post("/refreshToken", status_code=201, response_model=TokenPair)
async def refresh_token(
    body: RefreshTokenRequest,
    manager: RefreshTokenManager = Depends(get_refresh_token_manager),
) -> TokenPair:
    result = await manager.rotate(body.token, body.refresh_token)
    return result.unwrap()


@router.get("/ping")
async def ping(identity: Identity = Depends(require_identity)) -> str:
    return "Pong"
