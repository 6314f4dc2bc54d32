"""
Marketing Team Handlers
=======================
/add_marketing, /remove_marketing and /list_marketing.
"""

import logging
import re
from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from lang import _ as t
from bot.dependencies import get_deps
from data.marketing_team import normalize_username

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^@?\w+$")


def username_arg(args: list[str]) -> Optional[str]:
    """The single '@username' argument without the '@', or None."""
    if len(args) != 1 or not USERNAME_PATTERN.match(args[0]):
        return None
    return normalize_username(args[0])


async def add_marketing_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    deps = get_deps(context)
    username = username_arg(context.args or [])
    if not username:
        await update.message.reply_text(t("marketing_usage_add"))
        return

    if deps.marketing_team.add(username):
        await update.message.reply_text(t("marketing_added", username=username))
    else:
        await update.message.reply_text(t("marketing_already_member", username=username))


async def remove_marketing_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    deps = get_deps(context)
    username = username_arg(context.args or [])
    if not username:
        await update.message.reply_text(t("marketing_usage_remove"))
        return

    if deps.marketing_team.remove(username):
        await update.message.reply_text(t("marketing_removed", username=username))
    else:
        await update.message.reply_text(t("marketing_not_member", username=username))


async def list_marketing_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    deps = get_deps(context)
    members = deps.marketing_team.list_members()

    if not members:
        await update.message.reply_text(t("marketing_empty"))
        return

    await update.message.reply_text(
        t("marketing_members", members="\n".join(f"@{username}" for username in members))
    )
