"""Maturity Roadmap.

Implementation-planning core for the cloud-native maturity assessment.
Converts per-category (and optionally per-question) maturity scores into a
prioritised, time-phased roadmap drawn from a fixed capability catalog.
"""

__version__ = "0.1.0"
