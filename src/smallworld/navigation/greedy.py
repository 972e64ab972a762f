"""
Greedy navigation.

All variants consume iter_navigation, so they make the same moves and only
differ in pacing:
  greedy_navigate           - runs to completion, returns the path
  animated_navigate         - sleeps between hops and reports each step
  animated_navigate_async   - same, with asyncio.sleep

Status flow: idle -> running -> success | stuck | timeout.
"""

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple

from smallworld.common.config import ANIMATED_MAX_STEPS, DEFAULT_STEP_DELAY_MS, SYNC_MAX_STEPS
from smallworld.common.errors import InvalidParameter
from smallworld.model.types import LatticeNode
from smallworld.network_analysis.distance import manhattan_distance


class NavigationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCESS = "success"
    STUCK = "stuck"
    TIMEOUT = "timeout"

    @property
    def terminal(self) -> bool:
        return self in (NavigationStatus.SUCCESS, NavigationStatus.STUCK, NavigationStatus.TIMEOUT)


@dataclass(frozen=True)
class NavigationStep:
    path: Tuple[LatticeNode, ...]
    step: int
    remaining_distance: int
    status: NavigationStatus


# on_step(path_so_far, step_index, remaining_distance, status)
StepCallback = Callable[[List[LatticeNode], int, int, NavigationStatus], None]


def next_hop(current: LatticeNode, target: LatticeNode) -> Optional[LatticeNode]:
    """
    Neighbour of `current` closest to `target` by Manhattan distance.
    Ties go to the earliest neighbour in adjacency order; None if the node
    has no neighbours.
    """
    if not current.adjacency:
        return None
    best = current.adjacency[0]
    best_dist = manhattan_distance(best, target)
    for neighbor in current.adjacency:
        d = manhattan_distance(neighbor, target)
        if d < best_dist:
            best, best_dist = neighbor, d
    return best


def iter_navigation(
    start: LatticeNode,
    target: LatticeNode,
    max_steps: int = SYNC_MAX_STEPS,
) -> Iterator[NavigationStep]:
    """
    Walk greedily from `start` towards `target`, one yield per state change.

    Yields a `running` step 0 for the start position, a `running` step for
    each hop, and finally one terminal step: `success` once the target is
    reached, `stuck` at a node without neighbours, `timeout` after
    `max_steps` hops.
    """
    if max_steps < 0:
        raise InvalidParameter(f"max_steps must be >= 0, got {max_steps}")

    path = [start]
    current = start
    steps = 0
    yield NavigationStep(tuple(path), steps, manhattan_distance(current, target), NavigationStatus.RUNNING)

    while manhattan_distance(current, target) > 0 and steps < max_steps:
        steps += 1
        nxt = next_hop(current, target)
        if nxt is None:
            yield NavigationStep(
                tuple(path), steps, manhattan_distance(current, target), NavigationStatus.STUCK
            )
            return
        current = nxt
        path.append(current)
        yield NavigationStep(
            tuple(path), steps, manhattan_distance(current, target), NavigationStatus.RUNNING
        )

    remaining = manhattan_distance(current, target)
    status = NavigationStatus.SUCCESS if remaining == 0 else NavigationStatus.TIMEOUT
    yield NavigationStep(tuple(path), steps, remaining, status)


def navigate(
    start: LatticeNode,
    target: LatticeNode,
    max_steps: int = SYNC_MAX_STEPS,
) -> NavigationStep:
    """Run a navigation to completion and return its terminal step."""
    last = None
    for last in iter_navigation(start, target, max_steps):
        pass
    return last


def greedy_navigate(
    start: LatticeNode,
    target: LatticeNode,
    max_steps: int = SYNC_MAX_STEPS,
) -> List[LatticeNode]:
    """Greedy path from `start` (inclusive) as far as navigation gets."""
    return list(navigate(start, target, max_steps).path)


def _is_hop(step: NavigationStep) -> bool:
    return step.step > 0 and step.status is NavigationStatus.RUNNING


def _check_delay(delay_ms: float) -> None:
    if delay_ms < 0:
        raise InvalidParameter(f"delay_ms must be >= 0, got {delay_ms}")


def animated_navigate(
    start: LatticeNode,
    target: LatticeNode,
    on_step: StepCallback,
    delay_ms: float = DEFAULT_STEP_DELAY_MS,
    max_steps: int = ANIMATED_MAX_STEPS,
    is_cancelled: Optional[Callable[[], bool]] = None,
) -> List[LatticeNode]:
    """
    Paced navigation for animation.

    After every hop the loop sleeps `delay_ms` milliseconds, then calls
    on_step(path, step, remaining_distance, status). `is_cancelled` is
    polled before each callback; once it returns True nothing more is
    reported and the path walked so far is returned.
    """
    _check_delay(delay_ms)
    path: List[LatticeNode] = [start]
    for step in iter_navigation(start, target, max_steps):
        if _is_hop(step):
            time.sleep(delay_ms / 1000.0)
        path = list(step.path)
        if is_cancelled is not None and is_cancelled():
            return path
        on_step(list(step.path), step.step, step.remaining_distance, step.status)
    return path


async def animated_navigate_async(
    start: LatticeNode,
    target: LatticeNode,
    on_step: StepCallback,
    delay_ms: float = DEFAULT_STEP_DELAY_MS,
    max_steps: int = ANIMATED_MAX_STEPS,
    is_cancelled: Optional[Callable[[], bool]] = None,
) -> List[LatticeNode]:
    """animated_navigate for event loops: waits with asyncio.sleep between hops."""
    _check_delay(delay_ms)
    path: List[LatticeNode] = [start]
    for step in iter_navigation(start, target, max_steps):
        if _is_hop(step):
            await asyncio.sleep(delay_ms / 1000.0)
        path = list(step.path)
        if is_cancelled is not None and is_cancelled():
            return path
        on_step(list(step.path), step.step, step.remaining_distance, step.status)
    return path
