"""Hermite curve generator."""
