'''     linkarm    - direct and inverse kinematic of serial linkage chains

	main concepts
	-------------
		A chain is a succession of rigid linkages starting from a fixed base. Its state is given by a `pitch` and a `rotate` angle per linkage, the joint positions are deduced from them by `direct`.
		Inverse kinematic moves the end effector toward a target by Cyclic Coordinate Descent, then extracts the angles back from the moved positions.

	data types
	----------
		vectors and quaternions are `glm` double precision types, aliased `vec3` and `quat`
		angles are floats in radians, except in the `Arm` interactive session which works in degrees
'''
version = '0.1.0'

# computation
from . import (
		# base tools (defines types for the whole library)
		mathutils, settings,
		kinematic,
	)
# interactive session
from . import arm

# the most common tools, imported to access it directly from linkarm
from .mathutils import vec3, quat, O, X, Y, Z
from .kinematic import Chain, KinematicError, Pivoting, direct, extract, solve_step, solve
from .arm import Arm
