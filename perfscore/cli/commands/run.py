import argparse
from argparse import Namespace

from ...fuzzy.io.config import STEPS, ConfigError
from ..argtypes import parse_at, DEFAULT_GPA_COL, DEFAULT_ACTIVITY_COL
from .show import cmd_show
from .evaluate import cmd_evaluate
from .explain import cmd_explain
from .apply import cmd_apply

_COMMANDS = {
    "show": cmd_show,
    "evaluate": cmd_evaluate,
    "explain": cmd_explain,
    "apply": cmd_apply,
}

_DEFAULTS = {
    "show": {"at": None},
    "evaluate": {"json": False},
    "explain": {"json": False, "threshold": 0.0},
    "apply": {"out": None, "gpa_col": DEFAULT_GPA_COL, "activity_col": DEFAULT_ACTIVITY_COL},
}

_REQUIRED = {
    "show": (),
    "evaluate": ("gpa", "activity"),
    "explain": ("gpa", "activity"),
    "apply": ("csv",),
}

def _ns(step: str, section: dict, cfg: dict, path: str) -> Namespace:
    d = dict(_DEFAULTS[step])
    d.update({k.replace("-", "_"): v for k, v in section.items()})
    missing = [k for k in _REQUIRED[step] if k not in d]
    if missing:
        raise ConfigError(f"section '{step}' is missing: {', '.join(missing)}", path)
    if step == "show" and isinstance(d.get("at"), str):
        try:
            d["at"] = parse_at(d["at"])
        except argparse.ArgumentTypeError as e:
            raise ConfigError(f"show.at: {e}", path) from e
    d["cfg"] = cfg
    return Namespace(**d)

def cmd_run(args):
    cfg = args.cfg or {}
    ran = []
    for step in STEPS:
        if step not in cfg:
            continue
        print(f"[run] {step}")
        _COMMANDS[step](_ns(step, cfg[step], cfg, args.config))
        ran.append(step)
    if not ran:
        print("[run] nothing to do (no show/evaluate/explain/apply section)")
    return ran
