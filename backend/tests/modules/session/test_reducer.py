"""
Tests for auth state transitions.
"""

import pytest

from modules.auth.models import UserResponse
from modules.session.models import AuthPhase, AuthState
from modules.session.reducer import (
    OperationStarted,
    SessionCleared,
    SessionEstablished,
    UserFetchSettled,
    reduce,
)


@pytest.fixture
def alice(user):
    return UserResponse.model_validate(user)


class TestReduce:

    def test_initial_state(self):
        state = AuthState()

        assert state.user is None
        assert not state.is_loading
        assert not state.is_initialized
        assert state.phase == AuthPhase.UNINITIALIZED

    def test_operation_started(self):
        state = reduce(AuthState(), OperationStarted("fetch_user"))

        assert state.is_loading
        assert state.phase == AuthPhase.INITIALIZING

    def test_session_established(self, alice):
        state = reduce(AuthState(is_loading=True), SessionEstablished(alice))

        assert state.user == alice
        assert not state.is_loading
        assert state.phase == AuthPhase.AUTHENTICATED

    def test_session_cleared(self, alice):
        state = AuthState(user=alice, is_loading=True, is_initialized=True)

        state = reduce(state, SessionCleared("logout"))

        assert state.user is None
        assert not state.is_loading
        assert state.phase == AuthPhase.ANONYMOUS

    def test_fetch_settled_initializes(self):
        state = reduce(AuthState(), UserFetchSettled())

        assert state.is_initialized

    @pytest.mark.parametrize(
        "action_name", ["OperationStarted", "SessionEstablished", "SessionCleared", "UserFetchSettled"]
    )
    def test_initialization_never_reverts(self, alice, action_name):
        actions = {
            "OperationStarted": OperationStarted("login"),
            "SessionEstablished": SessionEstablished(alice),
            "SessionCleared": SessionCleared("logout"),
            "UserFetchSettled": UserFetchSettled(),
        }
        state = AuthState(is_initialized=True)

        assert reduce(state, actions[action_name]).is_initialized

    def test_state_is_not_mutated(self, alice):
        state = AuthState()

        reduce(state, SessionEstablished(alice))

        assert state.user is None

    def test_unknown_action(self):
        with pytest.raises(TypeError):
            reduce(AuthState(), "login")
