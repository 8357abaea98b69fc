# This file is part of pylinkarm,  distributed under license LGPL v3

''' This module defines the types and functions for the kinematic of a serial chain of rigid linkages.

	A chain is described by the lengths of its linkages, and for each linkage two angles relative to its parent linkage:
		- `pitch` - how much the linkage bends away from its parent direction, in `[0, pi]`
		- `rotate` - the twist of the bend plane around the parent direction, in `(-pi, pi]`

	The first linkage has a virtual parent along `X` with `Y` as up vector, and starts from the origin.

	This module mainly features:
		- `Chain` - the angles and lengths of a chain
		- `direct` - joint positions from angles
		- `extract` - angles from joint positions
		- `solve_step`, `solve` - inverse kinematic by Cyclic Coordinate Descent
'''

from .chain import *
from .direct import *
from .inverse import *
from .ccd import *
