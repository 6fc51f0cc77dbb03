"""
Workforce Report - utilisation reporting for employees and externals.

Turns heterogeneous personnel records into presentation-ready report rows
with utilisation percentages and net-earnings figures.
"""

__version__ = "0.1.0"
