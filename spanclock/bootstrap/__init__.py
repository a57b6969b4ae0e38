"""Bootstrap wiring for spanclock.

Composes the runtime probe, high-resolution adapters, and the timestamp
provider behind narrow accessors with testing overrides.
"""
