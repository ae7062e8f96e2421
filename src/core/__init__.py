"""
Core decimal math: fixed-scale primitive, trigonometry, and angle value objects.

This module contains the foundational building blocks that are independent
of any binary floating-point transcendental functions.
"""
