"""Tests for fflclient; shared payload builders live in ``tests.payloads``."""
