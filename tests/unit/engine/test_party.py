"""Tests for party resolution."""

from __future__ import annotations

from uuid import uuid4

import pytest

from tribute_sim.engine.party import PartyRequest, PartyService
from tribute_sim.engine.simulation import SimulationState
from tribute_sim.models.actors import Tribute
from tribute_sim.models.enums import PartyRequestType


@pytest.fixture
def state(katniss: Tribute, cato: Tribute, rue: Tribute) -> SimulationState:
    return SimulationState([katniss, cato, rue])


def join(state: SimulationState, actor: Tribute, other: Tribute | None) -> PartyRequest:
    return PartyRequest(
        request_type=PartyRequestType.JOIN,
        actor=actor,
        actor_party=state.party(actor),
        other_party=state.party(other) if other is not None else None,
    )


def leave(state: SimulationState, actor: Tribute) -> PartyRequest:
    return PartyRequest(
        request_type=PartyRequestType.LEAVE,
        actor=actor,
        actor_party=state.party(actor),
    )


class TestJoin:
    """Tests for join requests."""

    def test_neither_in_party_creates_shared_id(
        self, state: SimulationState, katniss: Tribute, rue: Tribute, cato: Tribute
    ) -> None:
        response = PartyService(state).handle(join(state, katniss, rue))

        assert response.success is True
        assert katniss.party_id is not None
        assert katniss.party_id == rue.party_id == response.party_id
        assert cato.party_id is None
        assert response.message == "Katniss banded together with Rue"

    def test_requester_adopts_target_party(
        self, state: SimulationState, katniss: Tribute, rue: Tribute, cato: Tribute
    ) -> None:
        existing = uuid4()
        state.assign_party([rue], existing)

        PartyService(state).handle(join(state, katniss, rue))

        assert katniss.party_id == existing
        assert rue.party_id == existing
        assert cato.party_id is None

    def test_target_adopts_requester_party(
        self, state: SimulationState, katniss: Tribute, rue: Tribute
    ) -> None:
        existing = uuid4()
        state.assign_party([katniss], existing)

        PartyService(state).handle(join(state, katniss, rue))

        assert rue.party_id == existing

    def test_parties_merge(
        self, state: SimulationState, katniss: Tribute, rue: Tribute, cato: Tribute
    ) -> None:
        first, second = uuid4(), uuid4()
        state.assign_party([katniss, rue], first)
        state.assign_party([cato], second)

        response = PartyService(state).handle(join(state, katniss, cato))

        assert response.success is True
        assert katniss.party_id == rue.party_id == cato.party_id == second
        assert response.message == "Katniss and Rue banded together with Cato"

    def test_no_one_found(self, state: SimulationState, katniss: Tribute) -> None:
        response = PartyService(state).handle(join(state, katniss, None))

        assert response.success is False
        assert "couldn't find anyone" in response.message
        assert katniss.party_id is None

    def test_cannot_join_self(self, state: SimulationState, katniss: Tribute) -> None:
        response = PartyService(state).handle(join(state, katniss, katniss))

        assert response.success is False
        assert katniss.party_id is None

    def test_cannot_join_dead(self, state: SimulationState, katniss: Tribute, rue: Tribute) -> None:
        rue.take_damage(100)
        request = PartyRequest(
            request_type=PartyRequestType.JOIN,
            actor=katniss,
            actor_party=[katniss],
            other_party=[rue],
        )

        response = PartyService(state).handle(request)

        assert response.success is False
        assert katniss.party_id is None
        assert rue.party_id is None

    def test_already_together(self, state: SimulationState, katniss: Tribute, rue: Tribute) -> None:
        party_id = uuid4()
        state.assign_party([katniss, rue], party_id)

        response = PartyService(state).handle(join(state, katniss, rue))

        assert response.success is False
        assert katniss.party_id == rue.party_id == party_id


class TestLeave:
    """Tests for leave requests."""

    def test_leave_removes_only_leaver(
        self, state: SimulationState, katniss: Tribute, rue: Tribute, cato: Tribute
    ) -> None:
        party_id = uuid4()
        state.assign_party([katniss, rue, cato], party_id)

        response = PartyService(state).handle(leave(state, rue))

        assert response.success is True
        assert response.message == "Rue left their party"
        assert rue.party_id is None
        assert katniss.party_id == cato.party_id == party_id

    def test_leave_without_party_is_noop(self, state: SimulationState, katniss: Tribute) -> None:
        response = PartyService(state).handle(leave(state, katniss))

        assert response.success is False
        assert "wasn't in one" in response.message
        assert katniss.party_id is None
