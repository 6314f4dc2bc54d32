"""Tests for the conversation engine transitions."""

import pytest

from bot.states import CreatingEvent, Idle, Registering
from data.department_registry import DepartmentRegistry
from data.models import FIELDS, EventDraft
from lang import _ as t
from services.conversation import (
    CompleteEvent,
    ConversationEngine,
    RegisterDepartment,
    start_event_creation,
)

from conftest import ANSWERS, DEPARTMENTS


@pytest.fixture
def engine():
    return ConversationEngine(DepartmentRegistry(DEPARTMENTS))


class TestRegistration:
    @pytest.mark.parametrize("state", [Idle(), Registering()])
    def test_valid_department_registers_and_resets(self, engine, state):
        outcome = engine.advance(1, "Kitchen", state)
        assert outcome.next_state == Idle()
        assert outcome.action == RegisterDepartment("Kitchen")

    def test_department_match_ignores_case_and_spaces(self, engine):
        outcome = engine.advance(1, "  front office ", Registering())
        assert outcome.action == RegisterDepartment("Front Office")

    @pytest.mark.parametrize("state", [Idle(), Registering()])
    def test_invalid_department_keeps_state(self, engine, state):
        outcome = engine.advance(1, "Laundry", state)
        assert outcome.next_state == state
        assert outcome.action is None
        assert "Invalid department" in outcome.reply
        assert "Kitchen" in outcome.reply


class TestEventWizard:
    def test_start_asks_for_client_name(self):
        outcome = start_event_creation()
        assert outcome.next_state == CreatingEvent(EventDraft())
        assert outcome.reply.endswith(t("ask_client_name"))

    def test_each_answer_prompts_for_next_field(self, engine):
        state = CreatingEvent()
        for index, answer in enumerate(ANSWERS[:-1]):
            outcome = engine.advance(1, answer, state)
            assert outcome.action is None
            assert outcome.reply == t(FIELDS[index + 1].prompt_key)
            state = outcome.next_state
            assert isinstance(state, CreatingEvent)
            assert state.draft.filled_count() == index + 1

    def test_last_answer_completes_event(self, engine):
        state = CreatingEvent()
        for answer in ANSWERS:
            outcome = engine.advance(1, answer, state)
            state = outcome.next_state

        assert state == Idle()
        assert isinstance(outcome.action, CompleteEvent)
        draft = outcome.action.draft
        assert [getattr(draft, f.name) for f in FIELDS] == ANSWERS

    def test_department_names_are_plain_answers_in_wizard(self, engine):
        outcome = engine.advance(1, "Kitchen", CreatingEvent())
        assert outcome.action is None
        assert outcome.next_state.draft.client_name == "Kitchen"

    def test_blank_answer_repeats_question(self, engine):
        state = CreatingEvent(EventDraft().with_next("A"))
        outcome = engine.advance(1, "   ", state)
        assert outcome.next_state == state
        assert outcome.reply == t("ask_company_name")

    def test_answers_are_trimmed(self, engine):
        outcome = engine.advance(1, "  Abebe  ", CreatingEvent())
        assert outcome.next_state.draft.client_name == "Abebe"

    def test_invalid_values_are_collected_and_left_to_validation(self, engine):
        draft = EventDraft()
        for answer in ANSWERS[:5]:
            draft = draft.with_next(answer)
        outcome = engine.advance(1, "tomorrow", CreatingEvent(draft))
        assert outcome.next_state.draft.event_date == "tomorrow"
        assert outcome.reply == t("ask_event_time")
