import warnings
from pytest import approx, raises, warns

from linkarm.mathutils import *
from linkarm.kinematic import KinematicError
from linkarm.arm import Arm


def test_fk_edit():
	arm = Arm([1, 1, 1, 1])
	assert arm.mode == 'FK' and arm.selected == 1
	arm.edit(pitch=90)
	assert tuple(arm.positions()[-1]) == approx((0,4,0), abs=1e-12)
	arm.select(2)
	arm.edit(pitch=90, rotate=90)
	assert arm.angles() == approx((90, 90))
	assert tuple(arm.positions()[2]) == approx((0,1,1), abs=1e-12)
	# the other linkage is left untouched
	arm.select(1)
	assert arm.angles() == approx((90, 0))

def test_fk_clamp():
	arm = Arm([1, 1])
	arm.edit(pitch=200, rotate=-270)
	assert arm.angles() == approx((180, 180))
	arm.edit(pitch=-5)
	assert arm.angles()[0] == 0

def test_select():
	arm = Arm([1, 1])
	with raises(ValueError):
		arm.select(0)
	with raises(ValueError):
		arm.select(3)

def test_modes():
	arm = Arm([1, 1, 1, 1])
	arm.edit(pitch=45)
	arm.set_mode('IK')
	assert arm.target == arm.chain.end()
	with raises(ValueError):
		arm.edit(pitch=10)
	arm.set_mode('FK')
	assert arm.target is None
	with raises(ValueError):
		arm.move((1,1,1))
	with raises(ValueError):
		arm.set_mode('XK')

def test_move():
	arm = Arm([1, 1, 1, 1])
	arm.set_mode('IK')
	with warnings.catch_warnings():
		warnings.simplefilter('error')
		residual = arm.move((1,1,1))
	assert residual < 1e-3
	assert arm.target == vec3(1,1,1)
	assert distance(arm.chain.end(), arm.target) <= residual + 1e-9

def test_move_unreachable():
	arm = Arm([1, 1, 1, 1])
	arm.set_mode('IK')
	chain = arm.chain
	with warns(UserWarning):
		residual = arm.move((100,0,0))
	assert residual == approx(96)
	# each move commits a new chain
	assert arm.chain is not chain

def test_move_strict():
	arm = Arm([1, 1, 1, 1], options={'strict': 1., 'warn_unconverged': False})
	arm.set_mode('IK')
	chain = arm.chain
	with raises(KinematicError):
		arm.move((0,100,0))
	# a failed move leaves the chain as it was
	assert arm.chain is chain
	assert arm.chain.pitch == [0]*4

def test_move_invalid():
	arm = Arm([1, 1])
	arm.set_mode('IK')
	with raises(ValueError):
		arm.move((nan, 0, 0))

def test_reset():
	arm = Arm([1, 1, 1, 1])
	arm.select(3)
	arm.edit(pitch=30, rotate=20)
	arm.set_mode('IK')
	arm.move((0,2,2))
	arm.reset()
	assert arm.selected == 1
	assert arm.chain.pitch == [0]*4 and arm.chain.rotate == [0]*4
	assert arm.target == vec3(4,0,0)
	assert arm.residual == approx(0)

def test_describe():
	arm = Arm([1, 1, 1, 1], options={'decimals': 2})
	arm.edit(pitch=90)
	arm.select(2)
	arm.edit(pitch=90)
	text = arm.describe().splitlines()
	assert len(text) == 5
	assert text[0] == '0. (0.00, 0.00, 0.00)'
	assert text[1].endswith('length=1.00')
	assert text[2].endswith('length=1.00, angle=90.00°')
	arm.set_mode('IK')
	assert arm.describe().splitlines()[-1].startswith('target (')
