"""Input/output adapters around the report core."""
