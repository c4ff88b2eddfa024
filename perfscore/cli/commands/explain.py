import json
from ...fuzzy.io.config import knowledge_from_config
from ...fuzzy.model.engine import MamdaniEngine

def _fmt_vec(d):
    return ", ".join(f"{k}={v:.3f}" for k, v in d.items())

def cmd_explain(args):
    engine = MamdaniEngine(knowledge_from_config(getattr(args, "cfg", None)))
    res = engine.explain(args.gpa, args.activity, threshold=getattr(args, "threshold", 0.0))
    if getattr(args, "json", False):
        print(json.dumps(res, indent=2))
        return
    print(f"gpa={res['inputs']['gpa']}: {_fmt_vec(res['memberships']['gpa'])}")
    print(f"activity={res['inputs']['activity']}: {_fmt_vec(res['memberships']['activity'])}")
    print("Rules:")
    for r in res["rules"]:
        print(f"  IF gpa is {r['gpa']} (μ={r['gpa_mu']:.3f}) AND activity is {r['activity']} "
              f"(μ={r['activity_mu']:.3f}) THEN performance is {r['output']}  alpha={r['alpha']:.4f}")
    if not res["rules"]:
        print("  (no rule above threshold)")
    print(f"Strengths: {_fmt_vec(res['strengths'])}")
    print(f"score: {res['score']:.2f}  label: {res['label']}")
