"""
Configuration file (JSON or YAML, picked by extension):

  engine:
    centroids: {low: 20, medium: 50, high: 80}
  logging:
    level: INFO
  # optional step sections, executed by `perfscore run` in this order
  show:     {at: "gpa=3.2,activity=72"}
  evaluate: {gpa: 3.2, activity: 72}
  explain:  {gpa: 3.2, activity: 72, threshold: 0.0}
  apply:    {csv: students.csv, out: scored.csv}

Only the centroid table and the log level change engine behaviour;
everything else has module defaults.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.types import FuzzyError
from ..model.knowledge import KnowledgeBase, DEFAULT_KB

log = logging.getLogger(__name__)

STEPS = ("show", "evaluate", "explain", "apply")
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class ConfigError(FuzzyError):
    def __init__(self, msg: str, path: Optional[str] = None):
        super().__init__(f"[{path}] {msg}" if path else msg)


def load_config(path: str) -> Dict[str, Any]:
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix not in (".json", ".yml", ".yaml"):
        raise ConfigError(f"unsupported config format '{suffix or p.name}' (use .json, .yml or .yaml)", path)
    try:
        with open(p, encoding="utf-8") as f:
            if suffix == ".json":
                cfg = json.load(f)
            else:
                cfg = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read file: {e.strerror}", path) from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"malformed content: {e}", path) from e

    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError("top level must be a mapping", path)
    for key in ("engine", "logging") + STEPS:
        if key in cfg and not isinstance(cfg[key], dict):
            raise ConfigError(f"section '{key}' must be a mapping", path)
    log.debug("loaded config %s: sections=%s", path, sorted(cfg))
    return cfg


def knowledge_from_config(cfg: Optional[Dict[str, Any]]) -> KnowledgeBase:
    centroids = ((cfg or {}).get("engine") or {}).get("centroids")
    if centroids is None:
        return DEFAULT_KB
    if not isinstance(centroids, dict):
        raise FuzzyError("engine.centroids must be a mapping of low/medium/high")
    kb = DEFAULT_KB.with_centroids(centroids)
    log.info("using centroid table %s", {t.value: z for t, z in kb.centroids.items()})
    return kb


def log_level_from_config(cfg: Optional[Dict[str, Any]], path: Optional[str] = None) -> Optional[str]:
    level = ((cfg or {}).get("logging") or {}).get("level")
    if level is None:
        return None
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {LOG_LEVELS}, got {level!r}", path)
    return name
