"""
Bot Package
===========
Telegram application, conversation states and command handlers.
"""
