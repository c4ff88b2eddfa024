from __future__ import annotations
from dataclasses import dataclass
from .types import Float

class MembershipFunction:
    def mu(self, x: Float) -> Float:
        raise NotImplementedError

@dataclass(frozen=True)
class Triangular(MembershipFunction):
    a: Float; b: Float; c: Float
    def mu(self, x: Float) -> Float:
        if x <= self.a or x >= self.c: return 0.0
        if x == self.b: return 1.0
        if x < self.b:  return (x - self.a) / (self.b - self.a)
        return (self.c - x) / (self.c - self.b)

@dataclass(frozen=True)
class LeftShoulder(MembershipFunction):
    """1 up to b, falls linearly to 0 at c."""
    b: Float; c: Float
    def mu(self, x: Float) -> Float:
        if x <= self.b: return 1.0
        if x >= self.c: return 0.0
        return (self.c - x) / (self.c - self.b)

@dataclass(frozen=True)
class RightShoulder(MembershipFunction):
    """0 up to a, rises linearly to 1 at b."""
    a: Float; b: Float
    def mu(self, x: Float) -> Float:
        if x <= self.a: return 0.0
        if x >= self.b: return 1.0
        return (x - self.a) / (self.b - self.a)
