import json
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ReconstructCfg:
    workers: int = 1
    chunk_size: int = 256

    def __post_init__(self: "ReconstructCfg") -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, not {self.workers}.")
        if self.chunk_size < 1:
            raise ValueError(
                f"chunk_size must be at least 1, not {self.chunk_size}."
            )

    @staticmethod
    def from_json(raw: str) -> "ReconstructCfg":
        data = json.loads(raw)
        defaults = ReconstructCfg()
        return ReconstructCfg(
            workers=int(data.get("workers", defaults.workers)),
            chunk_size=int(data.get("chunk_size", defaults.chunk_size)),
        )

    def to_json(self: "ReconstructCfg") -> str:
        return json.dumps(
            {"workers": self.workers, "chunk_size": self.chunk_size}, sort_keys=True
        )


def load_cfg(path: Path) -> ReconstructCfg:
    with path.open() as fd:
        return ReconstructCfg.from_json(fd.read())
