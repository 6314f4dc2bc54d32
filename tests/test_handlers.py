"""Tests for the Telegram command and message handlers."""

from telegram.constants import MessageLimit

from bot.handlers import (
    add_marketing_command,
    cancel_command,
    capture_chat_id_command,
    create_command,
    event_command,
    handle_message,
    list_department_command,
    list_events_command,
    list_marketing_command,
    register_command,
    remove_marketing_command,
    start_command,
)
from bot.handlers.events import chunk_messages
from bot.states import CreatingEvent, Registering, decode_state
from lang import _ as t

from conftest import ADMIN_ID, ANSWERS, complete_draft, make_update, replies, run


def send(handler, update, context):
    run(handler(update, context))
    return replies(update)


class TestRegistrationFlow:
    def test_start_register_and_welcome_back(self, deps, make_context):
        context = make_context()

        # Never-seen user is asked for a department
        update = make_update("/start")
        assert "Available departments: Kitchen" in send(start_command, update, context)[0]
        assert decode_state(deps.state_store.get(42)) == Registering()

        # Reply with a configured department
        update = make_update("Kitchen")
        assert send(handle_message, update, context) == [t("registered", department="Kitchen")]
        assert deps.registry.members("Kitchen") == [4242]
        assert deps.state_store.get(42) is None

        # Second /start does not prompt again
        update = make_update("/start")
        text = send(start_command, update, context)[0]
        assert "already registered" in text
        assert "Kitchen" in text
        assert deps.state_store.get(42) is None

    def test_invalid_department_keeps_registering(self, deps, make_context):
        context = make_context()
        send(start_command, make_update("/start"), context)

        reply = send(handle_message, make_update("Laundry"), context)[0]

        assert reply.startswith("Invalid department")
        assert decode_state(deps.state_store.get(42)) == Registering()
        assert deps.registry.departments_of(4242) == []

    def test_registering_twice_reports_existing(self, deps, make_context):
        deps.registry.register("Kitchen", 4242)
        reply = send(handle_message, make_update("kitchen"), make_context())
        assert reply == [t("already_registered", department="Kitchen")]

    def test_commands_are_not_conversation_input(self, deps, make_context):
        send(start_command, make_update("/start"), make_context())
        assert send(handle_message, make_update("/Kitchen"), make_context()) == []
        assert decode_state(deps.state_store.get(42)) == Registering()


class TestEventCreation:
    def test_non_member_cannot_create(self, deps, make_context):
        assert send(create_command, make_update("/create"), make_context()) == [t("marketing_only")]
        assert deps.state_store.get(42) is None

    def test_user_without_username(self, make_context):
        update = make_update("/create", username=None)
        assert send(create_command, update, make_context()) == [t("username_required")]

    def test_full_wizard_creates_and_broadcasts(self, deps, make_context, fake_bot):
        deps.marketing_team.add("planner")
        deps.registry.register("Kitchen", 601)
        deps.registry.register("Front Office", 602)
        context = make_context()

        first = send(create_command, make_update("/create"), context)[0]
        assert first.endswith(t("ask_client_name"))
        assert decode_state(deps.state_store.get(42)) == CreatingEvent()

        for answer in ANSWERS:
            update = make_update(answer)
            send(handle_message, update, context)

        assert replies(update) == [t("creating_event"), t("event_created")]
        assert deps.state_store.get(42) is None

        (event,) = deps.events.list_all()
        assert event.client_name == "Abebe Kebede"
        assert event.tin_number == "0012345678"
        assert event.services == ANSWERS[-1]
        assert [c.kwargs["chat_id"] for c in fake_bot.send_document.call_args_list] == [4242, 601, 602]

    def test_invalid_event_reports_reason_and_resets(self, deps, make_context, fake_bot):
        deps.marketing_team.add("planner")
        context = make_context()
        send(create_command, make_update("/create"), context)

        answers = list(ANSWERS)
        answers[5] = "2024-13-1"
        for answer in answers:
            update = make_update(answer)
            send(handle_message, update, context)

        assert replies(update)[-1] == t("event_invalid", reason="Date must be in YYYY-MM-DD format")
        assert deps.state_store.get(42) is None
        assert deps.events.list_all() == []
        fake_bot.send_document.assert_not_called()

    def test_corrupt_state_restarts_draft(self, deps, make_context):
        deps.state_store.set(42, "creating_event:{broken")
        reply = send(handle_message, make_update("Abebe"), make_context())
        assert reply == [t("ask_company_name")]
        assert decode_state(deps.state_store.get(42)).draft.client_name == "Abebe"

    def test_cancel(self, deps, make_context):
        deps.marketing_team.add("planner")
        send(create_command, make_update("/create"), make_context())
        assert send(cancel_command, make_update("/cancel"), make_context()) == [t("cancelled")]
        assert deps.state_store.get(42) is None
        assert send(cancel_command, make_update("/cancel"), make_context()) == [t("nothing_to_cancel")]


class TestMarketingCommands:
    def test_add_list_remove(self, deps, make_context):
        assert send(add_marketing_command, make_update(), make_context("@Sara")) == [
            t("marketing_added", username="sara")
        ]
        assert deps.marketing_team.is_member("sara")
        assert send(list_marketing_command, make_update(), make_context()) == [
            t("marketing_members", members="@sara")
        ]
        assert send(remove_marketing_command, make_update(), make_context("@sara")) == [
            t("marketing_removed", username="sara")
        ]
        assert send(list_marketing_command, make_update(), make_context()) == [t("marketing_empty")]

    def test_usage(self, make_context):
        assert send(add_marketing_command, make_update(), make_context()) == [t("marketing_usage_add")]
        assert send(remove_marketing_command, make_update(), make_context("a", "b")) == [
            t("marketing_usage_remove")
        ]


class TestAdminCommands:
    def test_list_requires_admin(self, make_context):
        reply = send(list_department_command, make_update(user_id=5), make_context("Kitchen"))
        assert reply == [t("admin_only_list")]

    def test_list_department(self, deps, make_context):
        admin = make_update(user_id=ADMIN_ID)
        assert send(list_department_command, admin, make_context("kitchen")) == [
            t("department_empty", department="Kitchen")
        ]
        deps.registry.register("Front Office", 77)
        admin = make_update(user_id=ADMIN_ID)
        assert send(list_department_command, admin, make_context("front", "office")) == [
            t("department_members", department="Front Office", members="77")
        ]

    def test_register_by_username(self, deps, make_context):
        send(capture_chat_id_command, make_update(username="Dawit", chat_id=888), make_context())

        admin = make_update(user_id=ADMIN_ID)
        reply = send(register_command, admin, make_context("Security", "@dawit"))

        assert reply == [t("user_registered", username="dawit", department="Security")]
        assert deps.registry.members("Security") == [888]

    def test_register_unknown_user(self, make_context):
        admin = make_update(user_id=ADMIN_ID)
        reply = send(register_command, admin, make_context("Security", "@ghost"))
        assert reply == [t("user_not_found", username="ghost")]

    def test_register_requires_admin(self, make_context):
        reply = send(register_command, make_update(user_id=5), make_context("Security", "@dawit"))
        assert reply == [t("admin_only_register")]


class TestEventListing:
    def test_no_events(self, make_context):
        assert send(list_events_command, make_update(), make_context()) == [t("no_events")]

    def test_lists_persisted_fields(self, deps, make_context):
        deps.events.create(complete_draft(event_name="Gala.Dinner"))

        update = make_update()
        (message,) = send(list_events_command, update, make_context())

        assert "Gala\\.Dinner" in message
        assert "*Participants:* 50" in message
        assert "2025\\-03\\-14" in message

    def test_event_by_id(self, deps, make_context):
        event = deps.events.create(complete_draft())

        assert "Annual Meeting" in send(event_command, make_update(), make_context(str(event.id)))[0]
        assert send(event_command, make_update(), make_context("999")) == [
            t("event_not_found", event_id="999")
        ]
        assert send(event_command, make_update(), make_context("abc")) == [t("event_usage")]

    def test_chunk_messages(self):
        entries = ["x" * 40 for _ in range(5)]
        messages = chunk_messages("T", entries, limit=100)
        assert all(len(m) <= 100 for m in messages)
        assert "".join(messages).count("x") == 200
        assert messages[0].startswith("T")

    def test_title_goes_alone_when_first_entry_is_large(self):
        assert chunk_messages("Title", ["x" * 98], limit=100) == ["Title", "x" * 98]

    def test_long_services_stay_within_message_limit(self, deps, make_context):
        for _ in range(3):
            deps.events.create(complete_draft(services="Coffee_break, " * 400))

        messages = send(list_events_command, make_update(), make_context())

        assert all(len(m) <= MessageLimit.MAX_TEXT_LENGTH for m in messages)
        assert "".join(messages).count("*Services:*") == 3
        assert "…" in messages[0]
