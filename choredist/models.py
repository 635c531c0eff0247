"""Data models for choredist."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chore:
    """A household chore with an effort cost and a reward."""

    name: str
    difficulty: int = 0  # effort cost
    earned: int = 0  # reward in whole dollars
    description: str = ""


@dataclass
class Person:
    """A family member who can be assigned chores."""

    name: str
    contact: str = ""  # phone number or Apple ID email for iMessage
    effort_capacity: int = 0  # 0 means no capacity limit
    pre_assigned_chores: list[Chore] = field(default_factory=list)
    chores: list[Chore] = field(default_factory=list)
    total_difficulty: int = 0
    total_earned: int = 0

    def reset_to_baseline(self) -> None:
        """Drop distributed chores and recompute totals from pre-assigned chores."""
        self.chores = []
        self.total_difficulty = sum(c.difficulty for c in self.pre_assigned_chores)
        self.total_earned = sum(c.earned for c in self.pre_assigned_chores)

    def has_capacity_for(self, chore: Chore) -> bool:
        return (
            self.effort_capacity == 0
            or self.total_difficulty + chore.difficulty <= self.effort_capacity
        )

    def assign(self, chore: Chore) -> None:
        self.chores.append(chore)
        self.total_difficulty += chore.difficulty
        self.total_earned += chore.earned

    @property
    def all_chores(self) -> list[Chore]:
        """Pre-assigned chores followed by distributed ones."""
        return [*self.pre_assigned_chores, *self.chores]


@dataclass
class DistributionResult:
    """Result of a distribution run."""

    people: list[Person]
    unassigned: list[Chore] = field(default_factory=list)  # no one had capacity

    @property
    def assigned_count(self) -> int:
        return sum(len(p.chores) for p in self.people)


@dataclass
class Config:
    """Chores and people loaded from a configuration file."""

    chores: list[Chore]
    people: list[Person]
