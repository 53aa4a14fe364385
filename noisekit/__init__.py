"""Composable noise functions, modifiers, fractals, noise maps and colour gradients."""

__version__ = "0.1.0"