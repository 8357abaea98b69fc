from __future__ import annotations

import numpy as np

from linkarm.mathutils import *
from linkarm.kinematic import direct


def straight(n: int, length: float=1.) -> list:
	''' joint positions of a straight chain of `n` linkages along X '''
	return [vec3(i*length, 0, 0)  for i in range(n+1)]

def random_chain(rng, n: int=4, margin: float=0.1) -> tuple:
	''' random `(pitch, rotate, lengths)` with angles kept `margin` away from the borders of their domains '''
	pitch = rng.uniform(margin, pi-margin, n).tolist()
	rotate = rng.uniform(-pi+margin, pi-margin, n).tolist()
	lengths = rng.uniform(0.5, 2., n).tolist()
	return pitch, rotate, lengths

def random_pose(rng, n: int=4) -> tuple:
	''' random `(positions, pitch, rotate, lengths)` of a consistent chain '''
	pitch, rotate, lengths = random_chain(rng, n)
	return direct(pitch, rotate, lengths), pitch, rotate, lengths

def coords(vectors) -> 'ndarray':
	''' vectors as a numpy array, for comparisons with `approx` '''
	return toarray(vectors)
