"""Service layer: validation, the welcome workflow, and worker dispatch."""
