"""
Config schemas - Pydantic models for the automata YAML file
"""

from pydantic import BaseModel, Field, model_validator
from typing import Dict, List, Optional, Union

from automata.models.transition import INT32_MIN, INT32_MAX

StateRef = Union[int, str]


class LoggingSettings(BaseModel):
    """Logger setup applied when the config is loaded"""
    level: str = Field("INFO", description="Minimum log level (DEBUG, INFO, WARN, ERROR)")
    colors: bool = Field(True, description="Enable ANSI colors")

    @model_validator(mode="after")
    def check_level(self):
        level = self.level.upper()
        if level not in ("DEBUG", "INFO", "WARN", "ERROR"):
            raise ValueError(f"Unknown log level '{self.level}'")
        self.level = level
        return self


class TransitionEntry(BaseModel):
    """One animated transition"""
    from_state: StateRef = Field(alias="from", description="State name or raw identifier")
    to_state: StateRef = Field(alias="to", description="State name or raw identifier")
    animation: str = Field(description="Animation name registered in AnimationManager")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "from": "HIDDEN",
                "to": "VISIBLE",
                "animation": "FADE_IN"
            }
        }


class AutomataSettings(BaseModel):
    """Complete automata definition"""
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    states: Dict[str, int] = Field(default_factory=dict, description="State name → identifier")
    initial_state: Optional[StateRef] = None
    transitions: List[TransitionEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_state_ids(self):
        for name, value in self.states.items():
            if not INT32_MIN <= value <= INT32_MAX:
                raise ValueError(f"State '{name}' identifier {value} is outside int32 range")

        raw_refs = [("initial_state", self.initial_state)]
        for i, entry in enumerate(self.transitions):
            raw_refs.append((f"transitions.{i}.from", entry.from_state))
            raw_refs.append((f"transitions.{i}.to", entry.to_state))
        for where, ref in raw_refs:
            if isinstance(ref, int) and not INT32_MIN <= ref <= INT32_MAX:
                raise ValueError(f"{where}: state identifier {ref} is outside int32 range")
        return self
