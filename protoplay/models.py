from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, PositiveInt, ValidationError, field_validator

from .dice import Dice
from .errors import InvalidConfiguration
from .rng import make_generator


class DiceConfig(BaseModel):
    sides: PositiveInt = 6
    generator: str = "one-through-ten"
    seed: Optional[int] = None
    fair: bool = False
    times: PositiveInt = 5

    @field_validator("sides", "times", "seed", mode="before")
    @classmethod
    def _no_bools(cls, v: Any) -> Any:
        # lax mode would turn True into 1
        if isinstance(v, bool):
            raise ValueError("must be an integer, not a boolean")
        return v

    def build(self) -> Dice:
        return Dice(self.sides, make_generator(self.generator, seed=self.seed), fair=self.fair)


def load_dice_config(data: Dict[str, Any]) -> DiceConfig:
    """Validate ``data`` into a ``DiceConfig``, raising ``InvalidConfiguration`` on bad input."""
    try:
        return DiceConfig.model_validate(data)
    except ValidationError as e:
        msgs = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise InvalidConfiguration("; ".join(msgs)) from e
