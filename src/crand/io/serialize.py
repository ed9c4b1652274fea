"""Serialization for sampling configs, raw engine state and sample summaries."""

from __future__ import annotations

import json
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from crand.config.schema import EngineKind, SamplingConfig
from crand.core.factory import ENGINE_TYPES, engine_kind
from crand.engines.base import BitEngine
from crand.utils.exceptions import ConfigError, StateError


class EngineState(BaseModel):
    """Raw state vector of an engine, tagged with the engine kind."""

    model_config = ConfigDict(extra="forbid")

    kind: EngineKind
    state: list[int] = Field(min_length=1, max_length=4)


def dump_engine_state(engine: BitEngine) -> str:
    """Serialize an engine's raw state words to a JSON string."""
    snapshot = EngineState(kind=engine_kind(engine), state=list(engine.state))  # type: ignore[arg-type]
    return snapshot.model_dump_json()


def load_engine_state(json_str: str) -> BitEngine:
    """Restore an engine from :func:`dump_engine_state` output.

    Raises:
        StateError: If the JSON is malformed or the state vector is invalid
            for the engine kind.
    """
    try:
        snapshot = EngineState.model_validate_json(json_str)
    except ValidationError as exc:
        raise StateError(f"invalid engine state: {exc}") from exc
    return ENGINE_TYPES[snapshot.kind].from_state(snapshot.state)


def dump_config(config: SamplingConfig) -> str:
    """Serialize a sampling config to a JSON string."""
    return json.dumps(config.model_dump(), indent=2)


def load_config(data: str | dict[str, Any]) -> SamplingConfig:
    """Deserialize a sampling config from a JSON string or parsed mapping.

    Raises:
        ConfigError: If the input is not valid JSON or fails validation.
    """
    try:
        raw: Any = json.loads(data) if isinstance(data, str) else data
        return SamplingConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(str(exc)) from exc


def dump_samples_summary(samples: np.ndarray, engine: BitEngine) -> str:
    """Summarize drawn values and the engine's final state as JSON."""
    values = samples.astype(np.float64) if samples.dtype != object else samples
    data = {
        "count": int(samples.size),
        "min": float(np.min(values)),
        "max": float(np.max(values)),
        "mean": float(np.mean(values)),
        "engine": json.loads(dump_engine_state(engine)),
    }
    return json.dumps(data, indent=2)
