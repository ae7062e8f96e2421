"""
Test suite for decimal-trig

Contains:
- tests/unit/          : Unit tests for the fixed-scale primitive, series engine,
                         trigonometry and the Angle value object
"""
