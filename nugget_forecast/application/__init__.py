"""
Application Layer Package

This package contains the application-specific rules of the prediction
engine. It parses caller input into domain entities, runs the domain
services and shapes their results for the outside world.
"""

# Re-export submodules
from nugget_forecast.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
