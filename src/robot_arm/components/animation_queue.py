from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(slots=True)
class AnimationQueue:
    """Append-only FIFO of animation tasks with a single cursor.

    Tasks before ``cursor`` are retired; the task at ``cursor`` is the only one
    that advances. ``started`` flips after the first tick.
    """
    tasks: List[Any] = field(default_factory=list)
    cursor: int = 0
    started: bool = False

    @property
    def current(self) -> Optional[Any]:
        if self.cursor < len(self.tasks):
            return self.tasks[self.cursor]
        return None

    @property
    def pending(self) -> int:
        return len(self.tasks) - self.cursor

    @property
    def idle(self) -> bool:
        return self.cursor >= len(self.tasks)
