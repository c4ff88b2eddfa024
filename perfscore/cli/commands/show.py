import sys
from typing import Dict, Optional

from ...fuzzy.core.types import Term
from ...fuzzy.io.config import knowledge_from_config


# ========= utils: ANSI / pretty =========

_RESET = "\x1b[0m"

def _use_ansi() -> bool:
    return sys.stdout.isatty()

def _ansi_color(mu: float) -> str:
    """
    Colour by degree:
      >= 0.50 green
      >= 0.20 yellow
      <  0.20 grey
    """
    if not _use_ansi():
        return ""
    if mu >= 0.50:
        return "\x1b[32m"
    if mu >= 0.20:
        return "\x1b[33m"
    return "\x1b[90m"

def _shape(mf) -> str:
    params = ", ".join(f"{v:g}" for v in vars(mf).values())
    return f"{type(mf).__name__}({params})"


# ========= main =========

def cmd_show(args) -> None:
    kb = knowledge_from_config(getattr(args, "cfg", None))
    at: Optional[Dict[str, float]] = getattr(args, "at", None) or {}

    print("Inputs:")
    for var in (kb.gpa, kb.activity):
        x = at.get(var.name)
        if x is None:
            terms = ", ".join(f"{t.value}={_shape(var.terms[t])}" for t in Term)
            print(f"  {var.name} [{var.vmin:g},{var.vmax:g}] -> {terms}")
            continue
        parts = []
        for t, mu in var.fuzzify(x).items():
            color = _ansi_color(mu)
            reset = _RESET if color else ""
            parts.append(f"{color}{t.value}({mu:.2f}){reset}")
        print(f"  {var.name}={x:g} [{var.vmin:g},{var.vmax:g}] -> " + ", ".join(parts))

    print("Output: performance -> centroids " +
          ", ".join(f"{t.value}={kb.centroids[t]:g}" for t in Term))

    print("Rules:")
    for i, r in enumerate(kb.rules, 1):
        print(f"  R{i}: {r.describe()}")
