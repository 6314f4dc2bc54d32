"""
English language strings for the Catering Event Bot
===================================================
Plain text unless noted; values are substituted with str.format.
"""

STRINGS = {
    # Welcome & Help
    "welcome_message": (
        "Welcome to the Hotel Catering Event Bot!\n\n"
        "Please register into a department by replying with the department name.\n\n"
        "Available departments: {departments}"
    ),
    "welcome_back": (
        "Welcome back to Planet Hotel Event Bot!\n\n"
        "You are already registered in the following departments: {departments}\n\n"
        "Commands:\n"
        "/create - Create a new event (Marketing team only)\n"
        "/list_events - List all upcoming events\n"
        "/add_marketing - Add a user to the marketing team\n"
        "/remove_marketing - Remove a user from the marketing team\n"
        "/help - Show this help message"
    ),
    "help_message": (
        "Hotel Catering Event Bot Commands:\n\n"
        "/start - Register your chat to a department\n"
        "/register [department] [@username] - Register a user to a department (Admin only)\n"
        "/list [department] - List chats in a department (Admin only)\n"
        "/add_marketing [@username] - Add a user to the marketing team\n"
        "/remove_marketing [@username] - Remove a user from the marketing team\n"
        "/list_marketing - List marketing team members\n"
        "/create - Create a new catering event (Marketing team only)\n"
        "/list_events - List all catering events\n"
        "/event [id] - Show one catering event\n"
        "/capture_chat_id - Let the admin register you by username\n"
        "/cancel - Stop registering or creating an event\n"
        "/help - Show this help message\n\n"
        "Available departments: {departments}"
    ),

    # Command menu
    "cmd_start": "Start the bot and see options",
    "cmd_help": "Show available commands",
    "cmd_add_marketing": "Add a user to the marketing team",
    "cmd_remove_marketing": "Remove a user from the marketing team",
    "cmd_list_marketing": "List all marketing team members",
    "cmd_list": "List users in a department (Admin only)",
    "cmd_register": "Register a user to a department (Admin only)",
    "cmd_create": "Create a new catering event (Marketing only)",
    "cmd_list_events": "List all upcoming catering events",
    "cmd_event": "Show one catering event",
    "cmd_capture_chat_id": "Share your chat ID with the admin",
    "cmd_cancel": "Cancel the current registration or event",

    # Registration
    "invalid_department": (
        "Invalid department. Please choose a valid department.\n\n"
        "Available departments: {departments}"
    ),
    "registered": "You are now registered to the {department} department.",
    "already_registered": "You are already registered to the {department} department.",
    "registration_error": "An error occurred while trying to register you. Please try again later.",

    # Admin
    "admin_only_list": "Sorry, only the admin can list users in departments.",
    "admin_only_register": "Sorry, only the admin can register users to departments.",
    "invalid_department_admin": "Invalid department. Available departments are: {departments}",
    "department_empty": "No users found in the {department} department.",
    "department_members": "Users in {department} department:\n{members}",
    "list_usage": "Usage: /list <department>",
    "register_usage": "Usage: /register <department> @username",
    "user_not_found": "User @{username} not found. Ask them to use /capture_chat_id command.",
    "user_registered": "User @{username} is now registered to the {department} department.",
    "user_already_registered": "User @{username} is already registered to the {department} department.",
    "chat_id_captured": "Chat ID for @{username} has been captured.",
    "username_required": "Error: Your Telegram username is not set. Please set a username in your Telegram settings and try again.",

    # Marketing team
    "marketing_usage_add": "Usage: /add_marketing @username",
    "marketing_usage_remove": "Usage: /remove_marketing @username",
    "marketing_added": "✅ User @{username} has been added to the marketing team.",
    "marketing_already_member": "User @{username} is already in the marketing team.",
    "marketing_removed": "❌ User @{username} has been removed from the marketing team.",
    "marketing_not_member": "User @{username} is not in the marketing team.",
    "marketing_empty": "⚠️ No marketing team members found.",
    "marketing_members": "📋 Marketing Team Members:\n{members}",
    "marketing_only": "Sorry, only marketing team members can create catering events.",

    # Event wizard
    "create_welcome": "Welcome to Planet Hotel Catering Order Maker System!",
    "ask_client_name": "Please enter the Client Name:",
    "ask_company_name": "Please enter the Company Name:",
    "ask_tin_number": "Please enter the TIN Number:",
    "ask_contact_number": "Please enter the Contact Number:",
    "ask_event_name": "Please enter the Event Name:",
    "ask_event_date": "Please enter the Event Date (YYYY-MM-DD):",
    "ask_event_time": "Please enter the Event Time (HH:MM):",
    "ask_participants": "Please enter the Number of Participants:",
    "ask_location": "Please enter the Event Location:",
    "ask_duration": "Please enter the Event Duration (Half Day or Full Day):",
    "ask_services": "Please enter the services (use comma for list of services):",
    "creating_event": "⏳ Creating the event document... Please wait.",
    "event_created": "Catering event created and broadcasted to all departments!",
    "event_invalid": "❌ The event was not created: {reason}\n\nSend /create to start again.",
    "event_storage_error": "❌ Could not save the event right now. Please try again later.",
    "event_error": "❌ Something went wrong while creating the event. Please try again later.",
    "cancelled": "❌ Cancelled.",
    "nothing_to_cancel": "Nothing to cancel.",

    # Event listing (MarkdownV2 labels, values are escaped by the caller)
    "no_events": "No upcoming events found.",
    "events_title": "📅 Upcoming Events:",
    "event_usage": "Usage: /event <id>",
    "event_not_found": "Event {event_id} not found.",
    "not_specified": "Not specified",

    # Broadcast
    "broadcast_title": "NEW CATERING EVENT",
    "broadcast_footer": "Please prepare accordingly.",
    "broadcast_caption": "Event {event_id} Details",
    "creator_caption": "Event {event_id} - {event_name}",

    # Storage
    "storage_error": "An error occurred. Please try again later.",

    # Event Document
    "doc_event_id": "Event ID",
    "doc_date": "Date",
    "doc_client_info": "Client Info",
    "doc_event_details": "Event Details",
    "doc_services": "Services",
    "doc_billing": "Billing Instruction",
    "doc_approval": "Service Approval",
    "doc_cc_departments": "CC - Department",
    "doc_page": "Page",
}
