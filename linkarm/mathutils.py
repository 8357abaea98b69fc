# This file is part of pylinkarm,  distributed under license LGPL v3

''' Vector and quaternion toolbox of linkarm, mostly re-exported from glm

	All vectors and quaternions are double precision (`dvec3`, `dquat`), aliased to `vec3` and `quat`
'''

import glm
from glm import *
del version, license
import math
from math import pi, inf, nan
max = __builtins__['max']
min = __builtins__['min']
any = __builtins__['any']
all = __builtins__['all']
round = __builtins__['round']

import numpy as np

# alias definitions
vec3 = dvec3
quat = dquat

# numerical precision of floats used
NUMPREC = 1e-13	# float64 here, so 14 decimals


# common base definition, also the fixed frame of a chain base
O = vec3(0,0,0)
X = vec3(1,0,0)
Y = vec3(0,1,0)
Z = vec3(0,0,1)


def isfinite(x):
	''' Return false if x contains a `inf` or a `nan` '''
	if isinstance(x, (int,float)):
		return math.isfinite(x)
	return not (glm.any(isinf(x)) or glm.any(isnan(x)))

def anglebt(x,y) -> float:
	''' Angle between two vectors, in `[0, pi]`

		The result is not sensitive to the lengths of x and y, and is 0 if one of them is null
	'''
	n = length(x)*length(y)
	return acos(min(1,max(-1, dot(x,y)/n)))	if n else 0

def project(vec, dir) -> vec3:
	''' Component of `vec` along `dir`, equivalent to :code:`dot(vec,dir) / dot(dir,dir) * dir`

		The result is not sensitive to the length of `dir`
	'''
	try:	return dot(vec,dir) / dot(dir,dir) * dir
	except ZeroDivisionError:
		if dot(vec,vec):		return vec3(nan)
		else:					return vec3(0)

def noproject(vec, dir) -> vec3:
	''' Components of `vec` not along `dir`, equivalent to :code:`vec - project(vec,dir)`

		This is the projection of `vec` on the plane of normal `dir`, not sensitive to the length of `dir`
	'''
	return vec - project(vec,dir)

def dirbase(dir, align=vec3(1,0,0)):
	''' Return a base using the given direction as z axis (and the nearer vector to align as x)

		The result is deterministic: when `align` is parallel to `dir`, its components are permuted until a usable one is found
	'''
	x = noproject(align, dir)
	if not length2(x) > NUMPREC**2:
		align = vec3(align[2],-align[0],align[1])
		x = noproject(align, dir)
	if not length2(x) > NUMPREC**2:
		align = vec3(align[1],-align[2],align[0])
		x = noproject(align, dir)
	x = normalize(x)
	y = cross(dir, x)
	return x,y,dir


def point(obj) -> vec3:
	''' Coerce a glm vector, a numpy row or any sequence of 3 numbers into a `vec3` '''
	if isinstance(obj, (dvec3, fvec3)):
		return vec3(obj)
	try:
		coords = [float(c) for c in obj]
	except TypeError:
		raise TypeError('a point must be a sequence of 3 numbers, not {}'.format(type(obj).__name__))
	if len(coords) != 3:
		raise ValueError('a point must have 3 components, got {}'.format(len(coords)))
	return vec3(*coords)

def points(obj) -> '[vec3]':
	''' Coerce a list of points or a `(n,3)` numpy array into a new list of `vec3` '''
	if isinstance(obj, np.ndarray) and (obj.ndim != 2 or obj.shape[1] != 3):
		raise ValueError('points array must have shape (n,3), not {}'.format(obj.shape))
	return [point(p)  for p in obj]

def toarray(vectors) -> 'ndarray':
	''' Stack the given vectors into a float64 numpy array of shape `(n,3)` '''
	return np.array([tuple(v)  for v in vectors], dtype=float).reshape(-1, 3)

def dump(v, decimals=3) -> str:
	''' Short text for a vector, as displayed in reports '''
	return '({})'.format(', '.join('{:.{}f}'.format(c, decimals)  for c in v))
