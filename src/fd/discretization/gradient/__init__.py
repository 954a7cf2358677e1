"""Pressure gradient stencils."""
