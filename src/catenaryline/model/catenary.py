"""
Catenary Data Structures
========================
Inputs, solved parameters and outputs of the transmission-line generator.

Classes:
    Mode: Which quantity the caller prescribes (tension, length or sag).
    Strategy: Which solver strategy actually produced a curve.
    LineOptions: Validated caller parameters.
    CatenaryParams: Shape parameters (a, b, c) of z(x) = a cosh((x - b) / a) + c.
    CurveMetadata: Descriptive data attached to a sampled curve.
    SampleSet: Sampled points plus metadata.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from enum import StrEnum
import math
from typing import Any, Dict, Optional, TYPE_CHECKING

import numpy as np

from catenaryline.config import (
    DEFAULT_LINEAR_WEIGHT,
    DEFAULT_NUM_POINTS,
    DEFAULT_SAG_RATIO,
    DEFAULT_TENSION,
)
from catenaryline.model.conductors import Conductor
from catenaryline.utils import catenary_constant, polyline_length, tension_from_rts_percent

if TYPE_CHECKING:
    import numpy.typing as npt


class Mode(StrEnum):
    PHYSICS = "physics"
    LENGTH = "length"
    SAG = "sag"


class Strategy(StrEnum):
    PHYSICS = "physics"
    LENGTH = "length"
    SAG = "sag"
    PARABOLA = "parabola"


@dataclass(frozen=True)
class LineOptions:
    """
    Caller parameters for one span.

    Only the inputs of the selected mode are consulted: tension and linear
    weight for PHYSICS, target length for LENGTH, sag ratio for SAG. The sag
    ratio is also used when LENGTH degrades to SAG. The linear weight is always
    used for the implied tension in the metadata.
    """
    mode: Mode = Mode.PHYSICS
    num_points: int = DEFAULT_NUM_POINTS
    sag_ratio: float = DEFAULT_SAG_RATIO
    target_length: Optional[float] = None
    linear_weight: float = DEFAULT_LINEAR_WEIGHT  # N/m
    tension: float = DEFAULT_TENSION  # N, horizontal component
    name: str = "Conductor"

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", Mode(self.mode))

        if int(self.num_points) != self.num_points or self.num_points < 1:
            raise ValueError(f"num_points must be a positive integer, got {self.num_points}.")
        if not math.isfinite(self.linear_weight):
            raise ValueError(f"linear_weight must be finite, got {self.linear_weight}.")

        # only the inputs the selected mode reads are checked
        if self.mode == Mode.PHYSICS:
            if not math.isfinite(self.tension) or self.tension <= 0.0:
                raise ValueError(f"tension must be positive and finite, got {self.tension}.")
            return

        if not math.isfinite(self.sag_ratio):
            raise ValueError(f"sag_ratio must be finite, got {self.sag_ratio}.")
        if self.mode == Mode.LENGTH:
            if self.target_length is None:
                raise ValueError("Length mode requires a target_length.")
            if not math.isfinite(self.target_length) or self.target_length <= 0.0:
                raise ValueError(f"target_length must be positive and finite, got {self.target_length}.")

    @property
    def catenary_constant(self) -> float:
        """Tension-to-weight ratio H / w."""
        return catenary_constant(self.tension, self.linear_weight)

    def with_mode(self, mode: Mode, **changes: Any) -> LineOptions:
        return replace(self, mode=mode, **changes)

    @staticmethod
    def for_conductor(
        conductor: Conductor,
        *,
        tension_percent: Optional[float] = None,
        **overrides: Any,
    ) -> LineOptions:
        """
        Build options from a conductor preset.

        Args:
            conductor: The conductor preset (linear weight, RTS).
            tension_percent: Horizontal tension as a percentage of the rated
                tensile strength. If omitted, `tension` from `overrides` or
                the default tension is used.
            **overrides: Any other LineOptions field.

        Returns:
            The options.
        """
        fields: Dict[str, Any] = {"linear_weight": conductor.linear_weight, "name": conductor.name}
        if tension_percent is not None:
            fields["tension"] = tension_from_rts_percent(tension_percent, conductor.rated_strength)
        fields.update(overrides)
        return LineOptions(**fields)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data


@dataclass(frozen=True)
class CatenaryParams:
    """
    Shape parameters of ``z(x) = a * cosh((x - b) / a) + c`` on a profile.

    `b` is the horizontal position of the vertex measured from the start of
    the span; `c` is chosen so the curve passes through the start height.
    """
    a: float
    b: float
    c: float

    def height(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        return self.a * np.cosh((x - self.b) / self.a) + self.c

    def rise(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Height above the start support, ``height(x) - height(0)``.

        Evaluated as ``2a sinh((x - 2b) / 2a) sinh(x / 2a)``, which stays exact
        where the two cosh terms of the direct difference are huge and cancel.
        """
        two_a = 2.0 * self.a
        return two_a * np.sinh((x - 2.0 * self.b) / two_a) * np.sinh(x / two_a)

    def arc_length(self, span: float) -> float:
        """Arc length between x = 0 and x = span."""
        two_a = 2.0 * self.a
        return two_a * math.sinh(span / two_a) * math.cosh((span - 2.0 * self.b) / two_a)


@dataclass(frozen=True)
class CurveMetadata:
    """
    Descriptive data of a sampled curve.

    Attributes:
        a: Catenary constant (equivalent value for the parabola fallback).
        max_sag: Largest vertical distance of the samples below the chord.
            This is a discrete value at the sampling resolution.
        implied_tension: a * linear_weight, in N.
        linear_weight: Linear weight used, in N/m.
        requested_mode: Mode asked for by the caller.
        strategy: Strategy that produced the curve.
        converged: False when the Physics vertex search failed and the vertex
            was placed at the start of the span.
    """
    a: float
    max_sag: float
    implied_tension: float
    linear_weight: float
    requested_mode: Mode
    strategy: Strategy
    converged: bool = True

    @property
    def used_fallback(self) -> bool:
        return not self.converged or self.strategy.value != self.requested_mode.value

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["requested_mode"] = self.requested_mode.value
        data["strategy"] = self.strategy.value
        data["used_fallback"] = self.used_fallback
        return data


@dataclass(frozen=True)
class SampleSet:
    """
    Ordered points of a span in the local frame, shape (N + 1, 3).

    `metadata` is None for a degenerate span, whose points are the two raw
    endpoints.
    """
    points: npt.NDArray[np.float64]
    metadata: Optional[CurveMetadata] = None

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start(self) -> npt.NDArray[np.float64]:
        return self.points[0]

    @property
    def end(self) -> npt.NDArray[np.float64]:
        return self.points[-1]

    @property
    def length(self) -> float:
        """Piecewise-linear length of the samples."""
        return polyline_length(self.points)
