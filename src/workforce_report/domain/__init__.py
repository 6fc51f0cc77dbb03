"""Business domains for Workforce Report."""
