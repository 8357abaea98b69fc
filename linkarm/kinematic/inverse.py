# This file is part of pylinkarm,  distributed under license LGPL v3

''' Angle extraction: from joint positions back to (pitch, rotate) angles, walking the same frames as `direct` '''

__all__ = ['iextract', 'extract']

from ..mathutils import *
from .. import settings
from .chain import check_positions, wrap_rotate
from .direct import frame_right, bend


def iextract(positions, lengths, precision=None):
	''' Yield `(pitch, rotate, view, up)` for each linkage of the chain going through `positions`

		Only the directions of the linkages are read from `positions`, their lengths are not. The twist of a linkage whose end is less than `precision` away from the parent axis is undefined and is reported as 0.
	'''
	if precision is None:	precision = settings.solver['precision']
	positions = points(positions)
	check_positions(positions, lengths)
	view, up = vec3(X), vec3(Y)
	for i in range(1, len(positions)):
		right = frame_right(view, up)
		child = positions[i] - positions[i-1]
		if not length2(child) > NUMPREC**2:
			raise ValueError('joints {} and {} are at the same position'.format(i-1, i))
		child = normalize(child)
		pitch = anglebt(view, child)
		lateral = noproject(child, view)
		if length(lateral) * lengths[i-1] < precision:
			rotate = 0.
		else:
			rotate = anglebt(up, lateral)
			if dot(right, lateral) < 0:
				rotate = -rotate
			rotate = wrap_rotate(rotate)
		q = bend(view, right, pitch, rotate)
		# keep up orthogonal to the new view
		up = normalize(noproject(q * up, child))
		view = child
		yield pitch, rotate, view, up

def extract(positions, lengths, precision=None) -> '(list, list)':
	''' Pitch and rotate arrays of the chain going through the given positions '''
	pitch, rotate = [], []
	for p, r, _, _ in iextract(positions, lengths, precision):
		pitch.append(p)
		rotate.append(r)
	return pitch, rotate
