from dataclasses import dataclass, field
from typing import Dict, Optional

from robot_arm.constants import BACKGROUND_COLOR, DEFAULT_COLUMNS, DEFAULT_ROWS, DEFAULT_SPEED


@dataclass(slots=True)
class ArmSettings:
    """Singleton component with the per-level configuration."""
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    speed: float = DEFAULT_SPEED
    # column index -> designated color; drops into these columns are validated
    color_assignment: Dict[int, str] = field(default_factory=dict)
    snap_color: Optional[str] = None
    consume_column_scan: bool = False
    background_color: str = BACKGROUND_COLOR

    @property
    def has_colored_columns(self) -> bool:
        return any(self.color_assignment.values())

    def color_for(self, column: int) -> Optional[str]:
        return self.color_assignment.get(column) or None
