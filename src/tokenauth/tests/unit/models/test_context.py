# ABOUTME: Unit tests for the request context and authentication result models
# ABOUTME: Verifies header lookup, identity binding and result timing

from datetime import datetime, UTC

import pytest

from tokenauth.models.auth.claims import Claims
from tokenauth.models.auth.identity import Identity
from tokenauth.models.middleware import AuthenticationResult, AuthenticationState, RequestContext


@pytest.fixture
def identity() -> Identity:
    return Identity(id=1, name="Jane", username="jane@example.com")


class TestRequestContext:
    """Tests for RequestContext."""

    @pytest.mark.unit
    def test_header_lookup_is_case_insensitive(self):
        context = RequestContext(headers={"Authorization": "Bearer abc"})

        assert context.get_header("authorization") == "Bearer abc"
        assert context.get_header("AUTHORIZATION") == "Bearer abc"
        assert context.get_header("X-Missing") is None

    @pytest.mark.unit
    def test_new_context_is_unauthenticated(self):
        context = RequestContext()

        assert not context.is_authenticated
        assert context.identity is None
        assert context.id

    @pytest.mark.unit
    def test_bind_identity(self, identity):
        now = datetime.now(UTC)
        claims = Claims(subject=identity.subject, issued_at=now, expires_at=now)
        context = RequestContext()

        context.bind_identity(identity, claims)

        assert context.is_authenticated
        assert context.identity == identity
        assert context.claims == claims

    @pytest.mark.unit
    def test_bind_identity_twice_fails(self, identity):
        context = RequestContext()
        context.bind_identity(identity)

        with pytest.raises(RuntimeError):
            context.bind_identity(identity)

    @pytest.mark.unit
    def test_contexts_do_not_share_state(self, identity):
        first = RequestContext()
        second = RequestContext()
        first.bind_identity(identity)
        first.set_metadata("key", "value")

        assert second.identity is None
        assert second.get_metadata("key") is None
        assert first.id != second.id


class TestAuthenticationResult:
    """Tests for AuthenticationResult."""

    @pytest.mark.unit
    def test_mark_completed_sets_timing(self):
        result = AuthenticationResult(middleware_name="test", state=AuthenticationState.PASS_THROUGH)

        result.mark_completed()

        assert result.completed_at is not None
        assert result.execution_time_ms is not None
        assert result.execution_time_ms >= 0
        assert result.should_continue

    @pytest.mark.unit
    def test_terminal_states(self):
        assert AuthenticationState.AUTHENTICATED.is_terminal
        assert AuthenticationState.REJECTED.is_terminal
        assert AuthenticationState.PASS_THROUGH.is_terminal
        assert not AuthenticationState.NO_TOKEN.is_terminal
        assert not AuthenticationState.TOKEN_PRESENT.is_terminal
