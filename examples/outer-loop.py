import logging
from linkarm import *

logging.basicConfig(level=logging.DEBUG)

# run the CCD passes by hand, deciding when to stop from the residual
lengths = [1, 1.5, 0.5, 1]
pitch, rotate = [0]*4, [0]*4
positions = direct(pitch, rotate, lengths)
target = vec3(1, 2, -1)

for i in range(20):
	residual, positions, pitch, rotate = solve_step(positions, target, pitch, rotate, lengths, 1e-4)
	print('pass', i, 'residual', residual)
	if residual < 1e-4:
		break

print('pitch', pitch)
print('rotate', rotate)
print('end effector', direct(pitch, rotate, lengths)[-1])
