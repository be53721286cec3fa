# scene.py
import logging

from camera.camera import Camera
from config import ASPECT_RATIO
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)


def create_world() -> HittableList:
    """
    Ground, a matte center sphere, a hollow glass sphere on the left and a
    polished metal sphere on the right.
    """
    world = HittableList()

    material_ground = ColorPresets.matte(ColorPresets.OLIVE)
    material_center = ColorPresets.matte(ColorPresets.NAVY)
    material_left = DielectricPresets.glass()
    material_right = MetalPresets.brass()

    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, material_ground))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, material_center))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, material_left))
    # Negative radius: inner wall of the glass shell
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), -0.45, material_left))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, material_right))

    logger.debug("Created world with %d spheres", len(world))
    return world


def create_camera(aspect_ratio: float = ASPECT_RATIO, aperture: float = 2.0,
                  mirror_lens_offset: bool = False) -> Camera:
    """
    Camera above and to the right of the spheres, focused on the center sphere.
    """
    lookfrom = Vector3(3, 3, 2)
    lookat = Vector3(0, 0, -1)
    vup = Vector3(0, 1, 0)
    dist_to_focus = (lookfrom - lookat).length()

    camera = Camera(lookfrom, lookat, vup, 20, aspect_ratio, aperture, dist_to_focus,
                    mirror_lens_offset=mirror_lens_offset)
    logger.debug("Created %r", camera)
    return camera
