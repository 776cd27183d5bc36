#!/usr/bin/env python3
"""
Exceptions raised by the gravity field engine.
"""


class GravFieldError(Exception):
    """Base class for simulator errors."""


class InvalidMassError(GravFieldError, ValueError):
    """A body was given a mass that is not strictly positive."""


class DegenerateDistanceError(GravFieldError, ZeroDivisionError):
    """Two mass points share a coordinate, so the pairwise force is undefined."""


class InvalidConfigError(GravFieldError, ValueError):
    """A simulation setting is outside its valid range."""
