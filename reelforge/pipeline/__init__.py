"""Content pipeline: orchestration, repurposing and platform dispatch."""
