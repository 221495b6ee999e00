"""Vector and transform math, rays, bounding boxes, configuration."""
