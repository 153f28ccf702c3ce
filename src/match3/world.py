import random

from esper import World
from .events.bus import EventBus


def create_world(event_bus: EventBus, *, rng: random.Random | None = None) -> World:
    """Create the ECS world shared by engines and their collaborators.

    ``world.random`` is the shared RNG; seed it (or pass ``rng``) for
    reproducible hints.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)
    return world
