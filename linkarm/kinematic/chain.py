# This file is part of pylinkarm,  distributed under license LGPL v3
__all__ = [
	'Chain', 'KinematicError',
	'check_chain', 'check_positions', 'clamp_pitch', 'wrap_rotate',
	]

import math
from ..mathutils import *
from .. import settings


class KinematicError(Exception):
	''' raised when an inverse kinematic problem could not be solved under the residual the caller required '''
	pass


def check_chain(pitch, rotate, lengths):
	''' Ensure the angle and length arrays describe the same chain, raise `ValueError` otherwise '''
	if not len(lengths):
		raise ValueError('a chain needs at least one linkage')
	if len(pitch) != len(lengths) or len(rotate) != len(lengths):
		raise ValueError('mismatched chain arrays: {} pitches, {} rotates, {} lengths'.format(
					len(pitch), len(rotate), len(lengths)))
	for i, l in enumerate(lengths):
		if not (isfinite(l) and l > 0):
			raise ValueError('linkage {} has invalid length {}'.format(i+1, l))

def check_positions(positions, lengths):
	''' Ensure there is a position for the base and each linkage end '''
	if len(positions) != len(lengths)+1:
		raise ValueError('expected {} positions for {} linkages, got {}'.format(
					len(lengths)+1, len(lengths), len(positions)))

def clamp_pitch(angle: float) -> float:
	''' Bring a pitch angle in its domain `[0, pi]` '''
	return min(pi, max(0., angle))

def wrap_rotate(angle: float) -> float:
	''' Bring a rotate angle in its domain `(-pi, pi]` '''
	angle = math.remainder(angle, 2*pi)
	if angle <= -pi:	angle += 2*pi
	return angle


class Chain:
	'''
		Serial chain of rigid linkages, starting from a fixed base at the origin.

		The canonical state of a chain is its angles, Cartesian positions are only a view computed on demand by `positions()`.
		All arrays are 0-based: `pitch[k]`, `rotate[k]` and `lengths[k]` belong to the linkage joining joint `k` to joint `k+1`, joint 0 being the base.

		Attributes:

			lengths (tuple):  lengths of the linkages, fixed at creation
			pitch (list):     bend of each linkage away from its parent direction, in `[0, pi]`
			rotate (list):    twist of each bend plane around the parent direction, in `(-pi, pi]`
	'''
	def __init__(self, lengths=None, pitch=None, rotate=None):
		if lengths is None:
			lengths = settings.chain['lengths']
		self.lengths = tuple(float(l)  for l in lengths)
		self.pitch = [float(a) for a in pitch]  if pitch is not None else [0.] * len(self.lengths)
		self.rotate = [float(a) for a in rotate]  if rotate is not None else [0.] * len(self.lengths)
		check_chain(self.pitch, self.rotate, self.lengths)

	@property
	def n(self) -> int:
		''' number of linkages '''
		return len(self.lengths)

	def reach(self) -> float:
		''' maximum distance between the base and the end effector '''
		return sum(self.lengths)

	def positions(self) -> '[vec3]':
		''' joint positions from base to end effector '''
		from .direct import direct
		return direct(self.pitch, self.rotate, self.lengths)

	def end(self) -> vec3:
		''' end effector position '''
		return self.positions()[-1]

	def set_pitch(self, index: int, angle: float):
		self.pitch[index] = clamp_pitch(angle)

	def set_rotate(self, index: int, angle: float):
		self.rotate[index] = wrap_rotate(angle)

	def reset(self):
		''' set all angles back to the straight chain '''
		self.pitch = [0.] * self.n
		self.rotate = [0.] * self.n

	def copy(self) -> 'Chain':
		return Chain(self.lengths, self.pitch, self.rotate)

	def solve_step(self, target, precision=None) -> float:
		''' run one CCD pass toward `target` and commit the resulting angles, return the residual '''
		from .ccd import solve_step
		residual, _, pitch, rotate = solve_step(self.positions(), target, self.pitch, self.rotate, self.lengths, precision)
		self.pitch, self.rotate = pitch, rotate
		return residual

	def solve(self, target, precision=None, maxiter=None, strict=None) -> float:
		''' run the inverse kinematic loop toward `target`, commit the resulting angles and return the residual

			see `linkarm.kinematic.ccd.solve` for the parameters
		'''
		from .ccd import solve
		residual, _, pitch, rotate = solve(self.positions(), target, self.pitch, self.rotate, self.lengths,
										precision, maxiter, strict)
		self.pitch, self.rotate = pitch, rotate
		return residual

	def report(self) -> '[dict]':
		''' description of every joint: its position, the length of the linkage ending on it and the angle between this linkage and the previous one

			entries for the base have no length, entries for the first linkage have no angle
		'''
		positions = self.positions()
		entries = []
		for i, p in enumerate(positions):
			entry = {'index': i, 'position': p, 'length': None, 'angle': None}
			if i >= 1:
				entry['length'] = distance(p, positions[i-1])
			if i >= 2:
				entry['angle'] = anglebt(p - positions[i-1], positions[i-1] - positions[i-2])
			entries.append(entry)
		return entries

	def __eq__(self, other):
		return (isinstance(other, Chain)
			and self.lengths == other.lengths
			and self.pitch == other.pitch
			and self.rotate == other.rotate)

	def __repr__(self):
		return '{}({}, pitch={}, rotate={})'.format(self.__class__.__name__, list(self.lengths), self.pitch, self.rotate)
