"""Application layer: parsing orchestration, detection, resolution, reporting."""
