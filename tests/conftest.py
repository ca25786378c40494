"""Test configuration and fixtures."""

import os

import logfire

# Settings are loaded from the environment; the signing secret is mandatory
os.environ.setdefault("AUTH__JWT_SECRET", "test-signing-secret-with-at-least-32-bytes")
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)
