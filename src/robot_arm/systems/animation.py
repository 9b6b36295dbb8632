import logging
import math

from esper import World

from robot_arm.constants import FIRST_TICK_ELAPSED_MS
from robot_arm.events.bus import (EVENT_TICK, EventBus, EVENT_ANIMATION_START, EVENT_ANIMATION_COMPLETE,
                                  EVENT_ANIMATIONS_IDLE, EVENT_LEVEL_LOADED)
from robot_arm.factories.animation_factory import AnimationFactory
from robot_arm.utils.arm_motion import MotionContext
from robot_arm.world import get_animation_queue, get_settings, get_surface, get_visual_state

LOG = logging.getLogger(__name__)


class AnimationSystem:
    """Advances the queued animation tasks, strictly one at a time, on every tick."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory()
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_LEVEL_LOADED, self.on_level_loaded)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind')
        if not kind:
            return
        task = self.factory.create(kind, color=kwargs.get('color'))
        queue = get_animation_queue(self.world)
        queue.tasks.append(task)
        LOG.debug("Queued %s animation (%d pending)", kind, queue.pending)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        queue = get_animation_queue(self.world)
        elapsed_ms = self._elapsed_ms(dt, first=not queue.started)
        queue.started = True
        task = queue.current
        if task is None:
            return
        ctx = MotionContext(
            visual=get_visual_state(self.world),
            settings=get_settings(self.world),
            surface=get_surface(self.world),
        )
        if not task.advance(elapsed_ms, ctx):
            return
        index = queue.cursor
        queue.cursor += 1
        self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=task.kind, index=index)
        if queue.idle:
            self.event_bus.emit(EVENT_ANIMATIONS_IDLE, completed=queue.cursor)

    def on_level_loaded(self, sender, **kwargs):
        self.reset()

    def reset(self):
        """Discard every queued task; the next tick counts as a first tick again."""
        queue = get_animation_queue(self.world)
        queue.tasks.clear()
        queue.cursor = 0
        queue.started = False

    @staticmethod
    def _elapsed_ms(dt, first: bool) -> float:
        elapsed = float(dt) * 1000
        if math.isnan(elapsed):
            raise ValueError(f"Tick delta must be a number, got {dt!r}")
        # A zero or first-frame delta would otherwise make the step formula jump.
        if first or elapsed <= 0:
            return FIRST_TICK_ELAPSED_MS
        return elapsed
