"""Configuration for the ray tracer, read from environment variables."""

import os

# Output image
RENDER_WIDTH = int(os.getenv("RT_WIDTH", "320"))
RENDER_HEIGHT = int(os.getenv("RT_HEIGHT", "240"))
OUTPUT_PATH = os.getenv("RT_OUTPUT", "render.png")

# Recursion depth for reflection/refraction
MAX_DEPTH = int(os.getenv("RT_MAX_DEPTH", "3"))

# Worker processes for a render pass; 1 renders in-process
RENDER_WORKERS = int(os.getenv("RT_WORKERS", str(os.cpu_count() or 1)))

# Seed for the demo scene layout
SCENE_SEED = int(os.getenv("RT_SEED", "0"))

# Logging settings
LOG_LEVEL = os.getenv("RT_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
