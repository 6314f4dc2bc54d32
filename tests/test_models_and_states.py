"""Tests for event drafts and the conversation state codec."""

from dataclasses import replace
from datetime import datetime

import pytest

from bot.states import (
    CreatingEvent,
    Idle,
    Registering,
    decode_state,
    encode_state,
)
from data.models import FIELD_ORDER, Event, EventDraft

from conftest import ANSWERS, complete_draft


class TestEventDraft:
    def test_fields_fill_in_fixed_order(self):
        draft = EventDraft()
        for expected_field in FIELD_ORDER:
            assert draft.next_field().name == expected_field
            draft = draft.with_next("x")
        assert draft.is_complete()
        assert draft.next_field() is None

    def test_with_next_returns_copy(self):
        draft = EventDraft()
        updated = draft.with_next("Abebe")
        assert draft.client_name is None
        assert updated.client_name == "Abebe"

    def test_complete_draft_rejects_more_values(self):
        with pytest.raises(ValueError):
            complete_draft().with_next("extra")

    def test_from_dict_keeps_only_contiguous_prefix(self):
        draft = EventDraft.from_dict({"clientName": "A", "tinNumber": "123", "companyName": ""})
        assert draft.client_name == "A"
        assert draft.company_name is None
        assert draft.tin_number is None
        assert draft.filled_count() == 1

    def test_from_dict_ignores_non_string_values(self):
        draft = EventDraft.from_dict({"clientName": 5})
        assert draft == EventDraft()

    def test_dict_round_trip_uses_camel_case(self):
        draft = EventDraft().with_next("A").with_next("B")
        assert draft.to_dict() == {"clientName": "A", "companyName": "B"}
        assert EventDraft.from_dict(draft.to_dict()) == draft


class TestServiceItems:
    def _event(self, services):
        draft = complete_draft(services=services)
        return Event.from_draft(1, datetime(2025, 1, 1), draft)

    def test_comma_list_is_split(self):
        assert self._event("Coffee, Lunch ,  Projector").service_items() == ["Coffee", "Lunch", "Projector"]

    def test_single_service_is_not_a_list(self):
        assert self._event("Full buffet").service_items() == []

    def test_labelled_rows(self):
        event = replace(self._event("Lunch"), tin_number=None)
        assert event.labelled(("client_name", "tin_number"), "N/A") == [
            ("Client Name", "Abebe Kebede"),
            ("Company TIN no.", "N/A"),
        ]


class TestStateCodec:
    def test_idle_has_no_token(self):
        assert encode_state(Idle()) is None
        assert decode_state(None) == Idle()
        assert decode_state("") == Idle()

    def test_registering(self):
        assert encode_state(Registering()) == "registering"
        assert decode_state("registering") == Registering()

    def test_creating_event_round_trip(self):
        draft = EventDraft()
        for answer in ANSWERS[:4]:
            draft = draft.with_next(answer)
        token = encode_state(CreatingEvent(draft))
        assert token.startswith("creating_event:")
        assert decode_state(token) == CreatingEvent(draft)

    def test_legacy_empty_draft_token(self):
        assert decode_state("creating_event: {}") == CreatingEvent(EventDraft())

    def test_tag_without_payload(self):
        assert decode_state("creating_event") == CreatingEvent(EventDraft())

    @pytest.mark.parametrize("payload", ["{not json", "[1, 2]", "\"text\"", "null"])
    def test_malformed_draft_becomes_empty(self, payload):
        assert decode_state(f"creating_event:{payload}") == CreatingEvent(EventDraft())

    def test_unknown_tag_is_idle(self):
        assert decode_state("something_else") == Idle()

    def test_values_with_colons_survive(self):
        draft = EventDraft().with_next("Name: with colon")
        assert decode_state(encode_state(CreatingEvent(draft))).draft.client_name == "Name: with colon"
