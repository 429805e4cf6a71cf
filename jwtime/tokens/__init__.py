"""Sign and verify orchestration."""
