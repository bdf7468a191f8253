"""Diagnostics package.

Light-weight command line checks and tables. ``new_year_scatter`` needs the
``diagnostics`` extras (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "reference", "new_year_scatter"]
