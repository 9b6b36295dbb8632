import random

from esper import World
from robot_arm.components.animation_queue import AnimationQueue
from robot_arm.components.arm_settings import ArmSettings
from robot_arm.components.logical_state import LogicalState
from robot_arm.components.surface import Surface
from robot_arm.components.visual_state import VisualState


def create_world(
    *,
    settings: ArmSettings | None = None,
    surface: Surface | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding the arm's singleton components.

    One entity carries the configuration (settings + surface), one the logical
    state, one the visual state and one the animation queue. Boards start with
    ``settings.columns`` empty columns; a level or ``set_board`` fills them.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    settings = settings or ArmSettings()
    world.create_entity(settings, surface or Surface())

    logical = LogicalState()
    logical.board.columns = [[] for _ in range(settings.columns)]
    world.create_entity(logical)

    visual = VisualState()
    visual.board = logical.board.clone()
    world.create_entity(visual)

    world.create_entity(AnimationQueue())
    return world


def _single(world: World, component_type):
    for _, comp in world.get_component(component_type):
        return comp
    raise RuntimeError(f"{component_type.__name__} component not found")


def get_settings(world: World) -> ArmSettings:
    return _single(world, ArmSettings)


def get_surface(world: World) -> Surface:
    return _single(world, Surface)


def get_logical_state(world: World) -> LogicalState:
    return _single(world, LogicalState)


def get_visual_state(world: World) -> VisualState:
    return _single(world, VisualState)


def get_animation_queue(world: World) -> AnimationQueue:
    return _single(world, AnimationQueue)
