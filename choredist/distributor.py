"""Greedy reward balancing for chore distribution."""

from collections.abc import Sequence

import numpy as np

from choredist.const import LOGGER
from choredist.models import Chore, DistributionResult, Person

RandomSource = np.random.Generator | int | None


def order_chores(chores: Sequence[Chore], rng: RandomSource = None) -> list[Chore]:
    """
    Return a copy of chores in placement order.

    Chores are shuffled and then stable-sorted by reward, highest first, so
    chores with equal reward keep their random relative order.
    """
    rng = np.random.default_rng(rng)
    permutation = rng.permutation(len(chores))
    shuffled = [chores[i] for i in permutation]
    return sorted(shuffled, key=lambda c: c.earned, reverse=True)


def reset_people(people: Sequence[Person]) -> None:
    """Reset every person to the totals of their pre-assigned chores."""
    for person in people:
        person.reset_to_baseline()


def distribute(
    chores: Sequence[Chore],
    people: list[Person],
    rng: RandomSource = None,
) -> DistributionResult:
    """
    Assign chores to people, balancing total reward within capacity limits.

    Each chore goes to the person with the lowest current reward who still has
    effort capacity for it; ties are broken uniformly at random. People are
    updated in place and returned in their original order. Chores that fit
    no one are logged and listed in the result's ``unassigned``.

    People are expected to be at their baseline already (see ``reset_people``).
    """
    rng = np.random.default_rng(rng)
    unassigned: list[Chore] = []

    for chore in order_chores(chores, rng):
        candidates: list[int] = []
        min_earned: int | None = None

        for idx, person in enumerate(people):
            if not person.has_capacity_for(chore):
                continue

            if min_earned is None or person.total_earned < min_earned:
                min_earned = person.total_earned
                candidates = [idx]
            elif person.total_earned == min_earned:
                candidates.append(idx)

        if not candidates:
            LOGGER.warning("Could not assign chore '%s' - no one has capacity", chore.name)
            unassigned.append(chore)
            continue

        chosen = candidates[int(rng.integers(len(candidates)))]
        people[chosen].assign(chore)
        LOGGER.debug("Assigned '%s' to %s", chore.name, people[chosen].name)

    return DistributionResult(people=people, unassigned=unassigned)
