from dataclasses import dataclass
from .types import Term

@dataclass(frozen=True)
class Rule:
    gpa: Term
    activity: Term
    output: Term  # performance term

    def describe(self) -> str:
        return (f"IF gpa is {self.gpa.value} AND activity is {self.activity.value} "
                f"THEN performance is {self.output.value}")
