"""
Core package: card/deck models and concept ingestion.
"""
