from linkarm import *

# a 4 linkages arm, bent in FK mode like with the sliders of a kinematic view
arm = Arm([1, 1, 1, 1])
arm.select(2)
arm.edit(pitch=60, rotate=30)
print(arm.describe())

# switch to IK mode, the target starts on the end effector, then follows the given points
arm.set_mode('IK')
for target in [(1,1,1), (0,2,2), (-1,-1,1), (0,4,0)]:
	residual = arm.move(target)
	print('\ntarget', target, 'residual', residual)
	print(arm.describe())
