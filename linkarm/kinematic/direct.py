# This file is part of pylinkarm,  distributed under license LGPL v3

''' Direct kinematic of a chain: from (pitch, rotate) angles to joint positions

	Each linkage carries a frame `(view, up)`: `view` is the direction of the linkage, `up` is propagated from the fixed base frame `view = X, up = Y`.
	The rotation bringing a parent frame to its child is the composition of a bend of `pitch` around the parent `right` axis, followed by a twist of `rotate` around the parent `view` axis.

	A positive pitch bends toward `up`, a positive rotate turns the bend plane toward `right = cross(view, up)`.
'''

__all__ = ['frame_right', 'bend', 'frames', 'direct']

from ..mathutils import *
from .chain import check_chain


def frame_right(view: vec3, up: vec3) -> vec3:
	''' Unit right axis of a linkage frame, `normalize(cross(view, up))`

		When `view` and `up` are parallel the cross product vanishes, the right axis is then the unit vector orthogonal to `view` the closest to the base right axis `Z`
	'''
	right = cross(view, up)
	if length2(right) > NUMPREC:
		return normalize(right)
	return dirbase(view, Z)[0]

def bend(view: vec3, right: vec3, pitch: float, rotate: float) -> quat:
	''' Rotation from a parent linkage frame to its child frame

		The pitch rotation around `right` applies first, then the rotate twist around `view`
	'''
	return normalize(angleAxis(float(rotate), normalize(view)) * angleAxis(float(pitch), right))

def frames(pitch, rotate, lengths):
	''' Yield `(position, view, up)` for each linkage end, from the first linkage to the end effector '''
	check_chain(pitch, rotate, lengths)
	position = vec3(O)
	view, up = vec3(X), vec3(Y)
	for p, r, l in zip(pitch, rotate, lengths):
		q = bend(view, frame_right(view, up), p, r)
		view = normalize(q * view)
		up = normalize(q * up)
		position = position + l * view
		yield position, view, up

def direct(pitch, rotate, lengths) -> '[vec3]':
	''' Joint positions of the chain with the given angles, the base at the origin first

		Angles are not checked against their domains, lengths and array sizes are.
	'''
	return [vec3(O)] + [position  for position, _, _ in frames(pitch, rotate, lengths)]
