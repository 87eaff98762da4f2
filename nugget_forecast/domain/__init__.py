"""
Domain module - Domain Layer

Entities and pure services of the prediction engine. Nothing in this layer
performs I/O, reads the wall clock or logs; "now" is always a parameter.
"""
