"""Test configuration and fixtures."""

import os

import logfire

# Registry owners and environment for every container built in tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("REGISTRY__OWNERS", '["registry-owner"]')

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

ORGANIZER = "0xA11CE"
VOTER = "0xB0B"
OTHER_VOTER = "0xCAFE"
OWNER = "registry-owner"
