from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from cashsplit.summation import precise_sum

TARGET_TOLERANCE = 1e-9

Mode = Literal["unconstrained", "constrained"]


class Asset(BaseModel):
    name: str = Field(..., description="Label shown in reports, e.g. Bonds")
    value: float = Field(..., ge=0.0, allow_inf_nan=False)
    target: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Asset name cannot be empty.")
        return v


class SplitRequest(BaseModel):
    assets: List[Asset]
    delta: float = Field(..., allow_inf_nan=False)

    @field_validator("assets")
    @classmethod
    def validate_assets(cls, assets: List[Asset]) -> List[Asset]:
        if len(assets) < 2:
            raise ValueError("Allocation must be composed of at least 2 assets.")
        total = precise_sum(a.target for a in assets)
        if abs(total - 1.0) > TARGET_TOLERANCE:
            raise ValueError(f"Allocation targets must sum to 1, got {total:.12f}")
        if total != 1.0:
            assets = [a.model_copy(update={"target": a.target / total}) for a in assets]
        return assets

    @model_validator(mode="after")
    def validate_delta(self) -> "SplitRequest":
        total = self.total
        if total + self.delta < 0:
            raise ValueError(
                f"Cannot withdraw {-self.delta} from holdings worth {total}"
            )
        return self

    @property
    def values(self) -> List[float]:
        return [a.value for a in self.assets]

    @property
    def targets(self) -> List[float]:
        return [a.target for a in self.assets]

    @property
    def total(self) -> float:
        return precise_sum(self.values)


class SplitLine(BaseModel):
    name: str
    adjustment: float
    final_value: float
    target: float
    initial_allocation: float
    final_allocation: float


class SplitPlan(BaseModel):
    mode: Mode
    delta: float
    initial_total: float
    final_total: float
    lines: List[SplitLine] = Field(default_factory=list)

    @property
    def adjustments(self) -> List[float]:
        return [ln.adjustment for ln in self.lines]

    def summary(self) -> Dict[str, float]:
        buys = precise_sum(ln.adjustment for ln in self.lines if ln.adjustment > 0)
        sells = precise_sum(-ln.adjustment for ln in self.lines if ln.adjustment < 0)
        return {"buys": buys, "sells": sells, "net": buys - sells}
