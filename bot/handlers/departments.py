"""
Department Handlers (Admin only)
================================
/list <department> and /register <department> @username.
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes

from lang import _ as t
from bot.dependencies import get_deps
from bot.handlers.marketing import username_arg

logger = logging.getLogger(__name__)


async def list_department_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Show the chats registered in a department."""
    deps = get_deps(context)

    if not deps.is_admin(update.effective_user.id):
        await update.message.reply_text(t("admin_only_list"))
        return

    args = context.args or []
    if not args:
        await update.message.reply_text(t("list_usage"))
        return

    department = deps.registry.resolve(" ".join(args))
    if department is None:
        await update.message.reply_text(
            t("invalid_department_admin", departments=", ".join(deps.registry.names))
        )
        return

    members = deps.registry.members(department)
    if not members:
        await update.message.reply_text(t("department_empty", department=department))
        return

    await update.message.reply_text(
        t("department_members", department=department, members="\n".join(str(m) for m in members))
    )


async def register_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Register another user's captured chat to a department."""
    deps = get_deps(context)

    if not deps.is_admin(update.effective_user.id):
        await update.message.reply_text(t("admin_only_register"))
        return

    args = context.args or []
    username = username_arg(args[-1:]) if len(args) >= 2 else None
    if not username:
        await update.message.reply_text(t("register_usage"))
        return

    department = deps.registry.resolve(" ".join(args[:-1]))
    if department is None:
        await update.message.reply_text(
            t("invalid_department_admin", departments=", ".join(deps.registry.names))
        )
        return

    chat_id = deps.chat_directory.lookup(username)
    if chat_id is None:
        await update.message.reply_text(t("user_not_found", username=username))
        return

    if deps.registry.register(department, chat_id):
        await update.message.reply_text(t("user_registered", username=username, department=department))
    else:
        await update.message.reply_text(t("user_already_registered", username=username, department=department))
