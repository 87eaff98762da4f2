"""
Nugget Forecast Root Module

Blended "next event" prediction engine for baby-care activity tracking.

Layer Structure:
- Domain: Activity entities, prediction results and pure prediction services
- Application: Boundary DTOs and prediction use cases
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root and configuration
"""

__version__ = "1.0.0"
