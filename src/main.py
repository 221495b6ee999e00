# main.py
import logging

from camera.camera import Camera
from core import config
from core.logging_config import setup_logging
from core.vector import Vector3
from geometry.world import build_demo_scene
from renderer.framebuffer import Framebuffer
from renderer.raytracer import render

logger = logging.getLogger(__name__)


def main():
    setup_logging()

    width, height = config.RENDER_WIDTH, config.RENDER_HEIGHT
    framebuffer = Framebuffer(width, height)
    camera = Camera(Vector3(0, 4, -7), Vector3(0, 0, 0), 45.0, width / height)
    scene = build_demo_scene(config.SCENE_SEED)
    logger.info("Scene has %d objects and %d lights", len(scene.objects), len(scene.lights))

    render(framebuffer, camera, scene, config.MAX_DEPTH, config.RENDER_WORKERS)
    framebuffer.save(config.OUTPUT_PATH)
    logger.info("Wrote %s", config.OUTPUT_PATH)


if __name__ == "__main__":
    main()
