import argparse
from ..argtypes import parse_at, DEFAULT_GPA_COL, DEFAULT_ACTIVITY_COL
from ...fuzzy.io.config import LOG_LEVELS
from .evaluate import cmd_evaluate
from .explain import cmd_explain
from .show import cmd_show
from .apply import cmd_apply
from .run import cmd_run

def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="JSON/YAML file (engine.centroids, logging.level)")
    common.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                        help="overrides logging.level from --config (default WARNING)")

    ap = argparse.ArgumentParser(
        prog="perfscore",
        description="Student performance score from GPA and activity level (Mamdani fuzzy inference)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  perfscore evaluate --gpa 3.2 --activity 72\n"
            "  perfscore explain --gpa 3.2 --activity 72 --json\n"
            "  perfscore show --at gpa=3.2,activity=72\n"
            "  perfscore apply --csv students.csv --out scored.csv\n"
            "  perfscore run --config pipeline.yaml\n"
        ),
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    # evaluate
    sp_ev = sub.add_parser("evaluate", parents=[common], formatter_class=fmt,
                           help="Score one student")
    sp_ev.add_argument("--gpa", type=float, required=True)
    sp_ev.add_argument("--activity", type=float, required=True, help="activity level, 0-100")
    sp_ev.add_argument("--json", action="store_true")
    sp_ev.set_defaults(func=cmd_evaluate)

    # explain
    sp_e = sub.add_parser("explain", parents=[common], formatter_class=fmt,
                          help="Memberships, fired rules and strengths for one student")
    sp_e.add_argument("--gpa", type=float, required=True)
    sp_e.add_argument("--activity", type=float, required=True)
    sp_e.add_argument("--json", action="store_true")
    sp_e.add_argument("--threshold", type=float, default=0.0, help="hide rules with alpha <= threshold")
    sp_e.set_defaults(func=cmd_explain)

    # show
    sp_s = sub.add_parser("show", parents=[common], formatter_class=fmt,
                          help="Show variables, rules and centroids; optionally degrees at a point")
    sp_s.add_argument("--at", type=parse_at, default=None, help="e.g. gpa=3.2,activity=72")
    sp_s.set_defaults(func=cmd_show)

    # apply
    sp_a = sub.add_parser("apply", parents=[common], formatter_class=fmt,
                          help="Score every row of a CSV file")
    sp_a.add_argument("--csv", required=True)
    sp_a.add_argument("--out", help="output CSV (stdout when omitted)")
    sp_a.add_argument("--gpa-col", default=DEFAULT_GPA_COL)
    sp_a.add_argument("--activity-col", default=DEFAULT_ACTIVITY_COL)
    sp_a.set_defaults(func=cmd_apply)

    # run
    sp_run = sub.add_parser("run", formatter_class=fmt,
                            help="Run the steps listed in a config file")
    sp_run.add_argument("--config", required=True, help="path to config .json/.yaml")
    sp_run.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    sp_run.set_defaults(func=cmd_run)

    return ap
