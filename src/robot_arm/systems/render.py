from esper import World

from robot_arm.events.bus import EventBus, EVENT_LEVEL_LOADED
from robot_arm.rendering.arm_renderer import ArmLayout, ArmRenderer
from robot_arm.rendering.snapshot import RenderSnapshot, build_snapshot
from robot_arm.world import get_surface


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._renderer = ArmRenderer(get_surface(world))
        self.last_snapshot: RenderSnapshot | None = None
        self.event_bus.subscribe(EVENT_LEVEL_LOADED, self.on_level_loaded)

    def notify_resize(self, width: int, height: int):
        surface = get_surface(self.world)
        surface.width = width
        surface.height = height

    def on_level_loaded(self, sender, **kwargs):
        self.last_snapshot = None

    def process(self) -> ArmLayout:
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = self.window is None
        if not headless:
            try:
                arcade.get_window()
            except Exception:
                headless = True
        snapshot = build_snapshot(self.world)
        self.last_snapshot = snapshot
        return self._renderer.render(arcade, snapshot, headless=headless)
