"""Output layer.

This module serializes converted vocabulary records to disk.
It owns the destination file format and its encoding marker.
"""
