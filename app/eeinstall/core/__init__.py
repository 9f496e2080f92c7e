"""Core installer logic: configuration, resolution, planning and dispatch."""
