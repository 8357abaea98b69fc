# This file is part of pylinkarm,  distributed under license LGPL v3

''' Headless interactive session on a chain, with the two editing modes of a kinematic view:

	- `'FK'`  the angles of one selected linkage are edited directly, in degrees
	- `'IK'`  a target point is moved, and the chain follows it using the CCD solver

	Each IK move solves a copy of the chain and commits it at once, so the chain never exposes a half solved state.
'''

import warnings

from .mathutils import *
from . import settings
from .settings import getparam
from .kinematic import Chain

MODES = ('FK', 'IK')


class Arm:
	''' Interactive state of a chain

		Attributes:
			chain (Chain):	the chain being edited, replaced on every IK move
			mode (str):	`'FK'` or `'IK'`
			selected (int):	linkage edited in FK mode, counted from 1 like joints are displayed
			target (vec3):	point followed in IK mode, None in FK mode
			residual (float):	distance left to the target after the last IK move
			options (dict):	overrides for `settings.solver` and `settings.display` keys
	'''
	def __init__(self, lengths=None, options=None):
		self.chain = Chain(lengths)
		self.options = options or {}
		self.mode = 'FK'
		self.selected = 1
		self.target = None
		self.residual = None

	def _param(self, key):
		return getparam([self.options, settings.solver, settings.display], key)

	def select(self, linkage: int):
		''' select the linkage edited in FK mode '''
		if not 1 <= linkage <= self.chain.n:
			raise ValueError('linkage must be in [1, {}], not {}'.format(self.chain.n, linkage))
		self.selected = linkage

	def set_mode(self, mode: str):
		''' switch mode, entering IK mode puts the target on the current end effector '''
		if mode not in MODES:
			raise ValueError('mode must be one of {}, not {}'.format(MODES, repr(mode)))
		self.mode = mode
		if mode == 'IK':
			self.target = self.chain.end()
			self.residual = 0.
		else:
			self.target = None
			self.residual = None

	def edit(self, pitch: float=None, rotate: float=None):
		''' set the angles of the selected linkage, in degrees

			pitch is clamped to `[0, 180]` and rotate to `[-180, 180]`
		'''
		if self.mode != 'FK':
			raise ValueError('angles can only be edited in FK mode')
		k = self.selected - 1
		if pitch is not None:
			self.chain.set_pitch(k, radians(min(180., max(0., pitch))))
		if rotate is not None:
			self.chain.set_rotate(k, radians(min(180., max(-180., rotate))))

	def angles(self) -> '(float, float)':
		''' pitch and rotate of the selected linkage, in degrees '''
		k = self.selected - 1
		return degrees(self.chain.pitch[k]), degrees(self.chain.rotate[k])

	def move(self, target) -> float:
		''' move the IK target and make the chain follow it, return the distance left '''
		if self.mode != 'IK':
			raise ValueError('the target can only be moved in IK mode')
		target = point(target)
		if not isfinite(target):
			raise ValueError('target must be finite, not {}'.format(target))
		solved = self.chain.copy()
		residual = solved.solve(target,
					precision = self._param('precision'),
					maxiter = self._param('maxiter'),
					strict = self._param('strict'),
					)
		self.chain, self.target, self.residual = solved, target, residual
		if residual >= self._param('precision') and self._param('warn_unconverged'):
			warnings.warn('target {} not reached, {} left'.format(dump(target), residual))
		return residual

	def reset(self):
		''' straighten the chain, select the first linkage, and in IK mode put the target at the end of the straight chain '''
		self.chain.reset()
		self.selected = 1
		if self.mode == 'IK':
			self.target = self.chain.reach() * X
			self.residual = distance(self.chain.end(), self.target)

	def positions(self) -> '[vec3]':
		return self.chain.positions()

	def describe(self) -> str:
		''' text listing of the joints, with linkage lengths and angles between successive linkages '''
		decimals = self._param('decimals')
		lines = []
		for entry in self.chain.report():
			line = '{}. {}'.format(entry['index'], dump(entry['position'], decimals))
			if entry['length'] is not None:
				line += ', length={:.{}f}'.format(entry['length'], decimals)
			if entry['angle'] is not None:
				line += ', angle={:.{}f}°'.format(degrees(entry['angle']), decimals)
			lines.append(line)
		if self.mode == 'IK':
			lines.append('target {}, residual={:.{}f}'.format(dump(self.target, decimals), self.residual, decimals))
		return '\n'.join(lines)

	def __repr__(self):
		return '{}({}, mode={})'.format(self.__class__.__name__, repr(self.chain), repr(self.mode))
