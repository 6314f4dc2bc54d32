"""
Services Package
================
Business logic: conversation engine, validation, PDF rendering, broadcast.
Import the modules directly (services.conversation, services.validator, ...).
"""
