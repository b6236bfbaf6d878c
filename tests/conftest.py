"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


def leaf(header: str, description: str = "d", **extra) -> dict:
    """Build a metadata-bearing leaf node."""
    return {"header": header, "description": description, **extra}


@pytest.fixture
def scenario_tree() -> dict:
    """One top-level leaf and one group of two leaves."""
    return {
        "a": leaf("A", "desc-a"),
        "b": {"x": leaf("X", "d"), "y": leaf("Y", "d2")},
    }


@pytest.fixture
def deep_tree() -> dict:
    """A group whose first child is itself a group, followed by a leaf sibling."""
    return {
        "b": {
            "x": {"p": leaf("P"), "q": leaf("Q")},
            "y": leaf("Y"),
        },
        "c": "plain",
    }


@pytest.fixture
def server_config_tree() -> dict:
    """A realistic configuration document, keys deliberately out of alphabetical order."""
    return {
        "server": {
            "port": leaf("Port", "Listening port", defaultValue=8080),
            "host": leaf("Host", "Bind address", defaultValue="0.0.0.0"),
            "tls": {
                "enabled": leaf("TLS", "Serve over HTTPS", defaultValue=False),
                "cert": leaf("Certificate", "Path to the PEM file"),
            },
        },
        "logging": {
            "level": leaf("Level", "Minimum level", defaultValue="info", options=["debug", "info", "warn", "error"]),
        },
        "debug": True,
    }
