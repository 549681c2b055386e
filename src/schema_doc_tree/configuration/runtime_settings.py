"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionSettings:
    """Options fixed when a decoration session is created."""

    sparse: bool = False
    register_identifiers_eagerly: bool = True
