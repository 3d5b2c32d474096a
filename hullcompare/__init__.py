"""Brute force vs monotone chain convex hulls over indexed 2D points."""

# flake8: noqa
from hullcompare.geometry import *
from hullcompare.brute_force import *
from hullcompare.monotone_chain import *
from hullcompare.compare import *
