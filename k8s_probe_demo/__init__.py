"""Customer listing demo service with orchestration availability probes."""
