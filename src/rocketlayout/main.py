"""
Application Entry Point
=======================
Builds a demonstration vehicle (core stage with a ring of strap-on
boosters) and prints its debug tree and overall extent.
"""
import logging
import math

from rocketlayout.logging_config import setup_logging
from rocketlayout.model.booster_set import BoosterSet
from rocketlayout.model.component import AxialStage, BodyTube
from rocketlayout.model.tree import ComponentTree

logger = logging.getLogger(__name__)


def build_demo_tree() -> ComponentTree:
    tree = ComponentTree("Demo")

    sustainer = tree.root.add_child(AxialStage("Sustainer", length=1.2))
    sustainer.add_child(BodyTube("Sustainer tube", length=1.2, outer_radius=0.05))

    core = tree.root.add_child(AxialStage("Core", length=2.5))
    core.add_child(BodyTube("Core tube", length=2.5, outer_radius=0.08))

    boosters = core.add_child(BoosterSet(3, name="Strap-ons", length=1.5))
    boosters.radial_offset = 0.2
    boosters.angular_offset = math.pi / 6
    boosters.add_child(BodyTube("Booster tube", length=1.5, outer_radius=0.04))

    return tree


def main() -> None:
    setup_logging()

    tree = build_demo_tree()
    print(tree.debug_tree())

    extent = tree.estimate_extent()
    logger.info(f"Overall length {extent.length:.3f} m, diameter {extent.diameter:.3f} m.")


if __name__ == "__main__":
    main()
