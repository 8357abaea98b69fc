# This file is part of pylinkarm,  distributed under license LGPL v3

''' Cyclic Coordinate Descent (CCD) inverse kinematic

	A CCD pass rotates the sub-chain after each joint, from the end effector back to the base, by the shortest rotation bringing the end effector in line with the target as seen from that joint. The angles of the chain are then extracted back from the moved positions, and the positions returned are rebuilt from these angles.

	CCD is a greedy heuristic: it has no convergence guarantee and may stall, typically on targets out of reach or at the very limit of the reach. Functions here never mutate their arguments, they return new positions and angle lists.
'''

__all__ = ['Pivoting', 'pivot_rotation', 'sweep', 'solve_step', 'solve']

import logging
from enum import Enum

from ..mathutils import *
from .. import settings
from .chain import KinematicError, check_chain, check_positions
from .direct import direct
from .inverse import extract

logger = logging.getLogger(__name__)


class Pivoting(Enum):
	''' geometric cases of a CCD pivot rotation '''
	IDENTITY = 'identity'	# target or end effector on the pivot, or already aligned
	MINIMAL = 'minimal'	# shortest arc between two non colinear directions
	PERPENDICULAR = 'perpendicular'	# opposite directions, half turn around an arbitrary perpendicular axis


def pivot_rotation(current: vec3, wanted: vec3, precision: float) -> '(Pivoting, quat)':
	''' Rotation bringing the direction `current` onto the direction `wanted`, both relative to the same pivot

		When the directions are opposite, the rotation axis is the one given by `dirbase(current, Z)`, so the result is deterministic
	'''
	if length(wanted) < precision or length(current) < precision:
		return Pivoting.IDENTITY, quat()
	n1, n2 = normalize(current), normalize(wanted)
	axis = cross(n1, n2)
	if length2(axis) > NUMPREC:
		return Pivoting.MINIMAL, normalize(angleAxis(anglebt(n1, n2), normalize(axis)))
	elif dot(n1, n2) > 0:
		return Pivoting.IDENTITY, quat()
	else:
		return Pivoting.PERPENDICULAR, normalize(angleAxis(pi, dirbase(n1, Z)[0]))

def sweep(positions, target, precision) -> '([vec3], vec3)':
	''' One backward CCD sweep over the chain, followed by the rigid rotation of every sub-chain

		Returns the new positions and the end effector predicted by the sweep, the last position must match it
	'''
	positions = [vec3(p)  for p in positions]
	end = vec3(positions[-1])
	rotations = [quat()] * (len(positions)-1)
	# compute the rotation of each pivot, moving only the end effector
	for k in reversed(range(len(rotations))):
		pivot = positions[k]
		case, rotations[k] = pivot_rotation(end - pivot, target - pivot, precision)
		end = pivot + rotations[k] * (end - pivot)
		logger.debug('pivot %d: %s rotation, end effector at %s', k, case.name, dump(end))
	# apply it to the whole sub-chain after each pivot, in the same order
	for k in reversed(range(len(rotations))):
		pivot = positions[k]
		for j in range(k+1, len(positions)):
			positions[j] = pivot + rotations[k] * (positions[j] - pivot)
	return positions, end

def solve_step(positions, target, pitch, rotate, lengths, precision=None) -> '(float, list, list, list)':
	''' One CCD pass toward `target`

		Parameters:
			positions:	joint positions from the base to the end effector, a list of points or a `(n+1, 3)` array
			target:		point the end effector should reach
			pitch, rotate, lengths:  the chain arrays, of size `n`
			precision:	distance under which the target is considered reached, defaults to `settings.solver['precision']`

		Returns:
			`(residual, positions, pitch, rotate)`  the remaining distance to the target, and the new chain state
			If the target was already reached, the residual is 0 and the state is a copy of the given one.
	'''
	if precision is None:	precision = settings.solver['precision']
	if not precision > 0:
		raise ValueError('precision must be strictly positive, not {}'.format(precision))
	check_chain(pitch, rotate, lengths)
	positions = points(positions)
	check_positions(positions, lengths)
	target = point(target)
	pitch, rotate = list(pitch), list(rotate)

	if distance(positions[-1], target) < precision:
		return 0., positions, pitch, rotate

	swept, _ = sweep(positions, target, precision)
	pitch, rotate = extract(swept, lengths, precision)
	# the returned positions and residual are those of the extracted angles, not of the sweep
	positions = direct(pitch, rotate, lengths)
	residual = distance(positions[-1], target)
	return residual, positions, pitch, rotate

def solve(positions, target, pitch, rotate, lengths, precision=None, maxiter=None, strict=None) -> '(float, list, list, list)':
	''' Repeat CCD passes until the target is reached or the iteration budget is exhausted

		Parameters:
			precision:	as in `solve_step`
			maxiter:	maximum number of passes, defaults to `settings.solver['maxiter']`
			strict:

				residual tolerated once the budget is exhausted, above which `KinematicError` is raised.
				Defaults to `settings.solver['strict']`, leave it to None to always return the best effort

		Returns:
			`(residual, positions, pitch, rotate)`  as in `solve_step`
	'''
	if precision is None:	precision = settings.solver['precision']
	if maxiter is None:		maxiter = settings.solver['maxiter']
	if strict is None:		strict = settings.solver['strict']
	if maxiter < 0:
		raise ValueError('maxiter must be positive, not {}'.format(maxiter))
	check_chain(pitch, rotate, lengths)
	positions = points(positions)
	check_positions(positions, lengths)
	target = point(target)
	pitch, rotate = list(pitch), list(rotate)

	residual = distance(positions[-1], target)
	for k in range(maxiter):
		residual, positions, pitch, rotate = solve_step(positions, target, pitch, rotate, lengths, precision)
		logger.debug('pass %d: residual %g', k, residual)
		if residual < precision:
			logger.info('target %s reached in %d passes', dump(target), k+1)
			break
	else:
		logger.info('target %s not reached after %d passes, residual %g', dump(target), maxiter, residual)

	if strict is not None and residual > strict:
		raise KinematicError('convergence failed after {} passes, residual {} above {}'.format(maxiter, residual, strict))
	return residual, positions, pitch, rotate
