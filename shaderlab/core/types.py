"""
Core data types for ShaderLab.

Shaders and their parameters use @dataclass for structured representations.
Parameter values are the only mutable part of a shader once it is in the
catalog.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ShaderParameter:
    """A single numeric filter input exposed as a slider."""
    name: str  # filter input key, e.g. "radius"
    value: float
    min_val: float
    max_val: float
    label: str = ""  # human-readable name
    id: str = ""  # unique within the owning shader

    def __post_init__(self) -> None:
        if not (math.isfinite(self.min_val) and math.isfinite(self.max_val)):
            raise ValueError(f"{self.name}: bounds must be finite numbers")
        if self.min_val > self.max_val:
            raise ValueError(
                f"{self.name}: min {self.min_val} is greater than max {self.max_val}"
            )
        if not self.id:
            self.id = self.name
        if not self.label:
            self.label = self.name
        self.value = self.clamp(self.value)

    @property
    def range(self) -> tuple[float, float]:
        return self.min_val, self.max_val

    def clamp(self, value: float) -> float:
        """Bound value to [min_val, max_val]. NaN maps to min_val."""
        value = float(value)
        if math.isnan(value):
            return float(self.min_val)
        return float(min(max(value, self.min_val), self.max_val))


@dataclass
class Shader:
    """One catalog entry: a named filter and its adjustable parameters."""
    id: str
    name: str
    description: str = ""
    parameters: List[ShaderParameter] = field(default_factory=list)
    filter_name: str = ""  # registry identifier used at render time

    def __post_init__(self) -> None:
        if not self.filter_name:
            self.filter_name = self.name
        seen = set()
        for param in self.parameters:
            if param.id in seen:
                raise ValueError(f"Shader {self.id}: duplicate parameter id {param.id!r}")
            seen.add(param.id)

    def get_parameter(self, param_id: str) -> Optional[ShaderParameter]:
        """Find parameter by id."""
        for param in self.parameters:
            if param.id == param_id:
                return param
        return None

    def parameter_values(self) -> dict[str, float]:
        """Current values keyed by filter input name."""
        return {param.name: param.value for param in self.parameters}
