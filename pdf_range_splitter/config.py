"""Runtime configuration for PDF Range Splitter."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

COPY_METADATA_ENV = "PDF_RANGE_SPLITTER_COPY_METADATA"
PRODUCER_ENV = "PDF_RANGE_SPLITTER_PRODUCER"
DEFAULT_PRODUCER = "PDF Range Splitter"


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SplitterConfig:
    """
    Settings applied to every split run.

    Attributes:
        copy_metadata: Carry Title/Author/Subject/Creator over to the outputs
        producer: Value written to ``/Producer`` on the outputs
        output_extension: Extension used when naming output artifacts
    """
    copy_metadata: bool = True
    producer: str = DEFAULT_PRODUCER
    output_extension: str = "pdf"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SplitterConfig":
        env = os.environ if environ is None else environ
        producer = env.get(PRODUCER_ENV, "").strip() or DEFAULT_PRODUCER
        return cls(
            copy_metadata=_env_flag(env.get(COPY_METADATA_ENV), True),
            producer=producer,
        )

    def with_overrides(self, **changes: object) -> "SplitterConfig":
        """Return a copy with every non-``None`` value in ``changes`` applied."""

        updates = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **updates)


__all__ = ["SplitterConfig", "COPY_METADATA_ENV", "PRODUCER_ENV", "DEFAULT_PRODUCER"]
