"""Conductor Catalog - overhead line conductor presets."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Union
import logging

logger = logging.getLogger(__name__)


class ConductorType(StrEnum):
    DRAKE = "drake"
    CARDINAL = "cardinal"
    CURLEW = "curlew"
    BLUEJAY = "bluejay"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Conductor:
    """
    Physical data of a conductor type.
    """
    name: str
    linear_weight: float  # N/m
    rated_strength: float  # kN, rated tensile strength (RTS)


CONDUCTORS: Dict[ConductorType, Conductor] = {
    ConductorType.DRAKE: Conductor(name="ACSR Drake", linear_weight=15.97, rated_strength=139.9),
    ConductorType.CARDINAL: Conductor(name="ACSR Cardinal", linear_weight=17.94, rated_strength=150.3),
    ConductorType.CURLEW: Conductor(name="ACSR Curlew", linear_weight=19.46, rated_strength=163.7),
    ConductorType.BLUEJAY: Conductor(name="ACSR Bluejay", linear_weight=18.28, rated_strength=131.2),
    ConductorType.CUSTOM: Conductor(name="Custom", linear_weight=30.0, rated_strength=100.0),
}


def get_conductor(key: Union[ConductorType, str]) -> Conductor:
    """
    Look up a conductor preset by key ("drake") or display name ("ACSR Drake").

    Raises:
        ValueError: If no preset matches.
    """
    lookup = str(key).lower()
    for conductor_type, conductor in CONDUCTORS.items():
        if lookup in (conductor_type.value, conductor.name.lower()):
            return conductor

    logger.error(f"Unknown conductor requested: {key}")
    raise ValueError(f"Unknown conductor: {key}")
