"""Diffusion term stencils."""
