"""Shading integrator, framebuffer and the parallel render pass."""
