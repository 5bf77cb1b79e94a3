"""
CampusCoffee API

Points of sale, users and peer-approved reviews for a campus coffee platform.
"""

__version__ = "0.1.0"
