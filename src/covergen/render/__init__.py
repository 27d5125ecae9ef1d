"""Cover rendering pipeline."""
