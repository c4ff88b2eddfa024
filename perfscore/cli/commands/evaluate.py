import json
from ...fuzzy.io.config import knowledge_from_config
from ...fuzzy.model.engine import MamdaniEngine

def cmd_evaluate(args):
    engine = MamdaniEngine(knowledge_from_config(getattr(args, "cfg", None)))
    res = engine.evaluate(args.gpa, args.activity)
    if getattr(args, "json", False):
        print(json.dumps(res.as_dict()))
        return
    print(f"score: {res.score:.2f}")
    print(f"label: {res.label}")
