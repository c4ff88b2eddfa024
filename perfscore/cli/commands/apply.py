import csv
import logging
import math
import sys
from pathlib import Path

from ...fuzzy.core.types import FuzzyError
from ...fuzzy.io.config import knowledge_from_config
from ...fuzzy.model.engine import MamdaniEngine

log = logging.getLogger(__name__)

ERROR_LABEL = "error"

def _to_float(cell):
    """Blank or non-numeric cells give None."""
    if cell is None:
        return None
    cell = cell.strip()
    if not cell:
        return None
    try:
        x = float(cell)
    except ValueError:
        return None
    return x if math.isfinite(x) else None

def cmd_apply(args):
    """
    Score every row of a CSV with a header row. Adds 'score' and 'label' columns.
    Rows with unusable inputs keep going: score stays empty and label is 'error'.
    The output file is only opened once the input header has been checked.
    """
    engine = MamdaniEngine(knowledge_from_config(getattr(args, "cfg", None)))
    gcol, acol = args.gpa_col, args.activity_col

    out_path = getattr(args, "out", None)
    if out_path and Path(out_path).resolve() == Path(args.csv).resolve():
        raise SystemExit(f"--out must not be the input file ({args.csv}).")

    scored = failed = 0
    with open(args.csv, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames:
            raise SystemExit("Empty CSV file.")
        colnames = [c.strip() for c in reader.fieldnames]
        reader.fieldnames = colnames
        for col in (gcol, acol):
            if col not in colnames:
                raise SystemExit(f"Column '{col}' not found in CSV (columns: {colnames}).")

        out_f = open(out_path, "w", newline="", encoding="utf-8") if out_path else sys.stdout
        try:
            fields = colnames + [c for c in ("score", "label") if c not in colnames]
            writer = csv.DictWriter(out_f, fieldnames=fields, extrasaction="ignore")
            writer.writeheader()

            for lineno, row in enumerate(reader, start=2):
                g, a = _to_float(row.get(gcol)), _to_float(row.get(acol))
                if g is None or a is None:
                    log.warning("line %d: %s=%r %s=%r is not a usable number",
                                lineno, gcol, row.get(gcol), acol, row.get(acol))
                    row.update(score="", label=ERROR_LABEL)
                    failed += 1
                else:
                    try:
                        res = engine.evaluate(g, a)
                    except FuzzyError as e:
                        log.warning("line %d: %s", lineno, e)
                        row.update(score="", label=ERROR_LABEL)
                        failed += 1
                    else:
                        row.update(score=f"{res.score:.2f}", label=res.label)
                        scored += 1
                writer.writerow(row)
        finally:
            if out_path:
                out_f.close()
    log.info("apply: %d rows scored, %d rows with errors", scored, failed)
    return scored, failed
