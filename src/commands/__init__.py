"""
Command pattern implementation for the command relay.

This module keeps the relay and health check logic apart from the
HTTP layer so each operation can be executed and tested without
going through FastAPI.
"""
