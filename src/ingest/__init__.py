"""Source ingestion and conversion pipeline.

This module reads registry dumps and drives the conversion stages.
It hands mapped records to the output layer.
"""
