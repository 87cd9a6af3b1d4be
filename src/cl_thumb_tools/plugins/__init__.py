"""Geometry plugins: resize planning and watermark placement."""
