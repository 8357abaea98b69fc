'''	 The settings module holds dictionaries for each aspect of the linkarm library.

dictionaries:
	:solver:	default precision and iteration budget of inverse kinematics
	:chain:		default geometry of new chains
	:display:	how reports are rendered and reported
'''

import sys, os, yaml
from os.path import dirname, exists

# settings for the inverse kinematic solver
solver = {
	'precision': 1e-3,	# distance under which the end effector is considered on its target
	'maxiter': 10,	# number of CCD passes allowed in one solve
	'strict': None,	# if set, residual above which a solve raises KinematicError after its budget
	}

# default chain created when no lengths are given
chain = {
	'lengths': [1., 1., 1., 1.],	# lengths of the linkages from base to end effector
	}

# settings for text reports and user feedback
display = {
	'decimals': 3,	# decimals of coordinates and angles in reports
	'warn_unconverged': True,	# emit a warning when an interactive target could not be reached
	}


# get configuration directory depending on OS
if sys.platform == 'win32':
	home = os.getenv('USERPROFILE') or ''
	configdir = home+'/AppData/Local'
else:
	home = os.getenv('HOME') or ''
	configdir = home+'/.config'

config = configdir+'/linkarm/linkarm.yaml'
settings = {'solver':solver, 'chain':chain, 'display':display}


def install():
	''' Create and fill the config directory if not already existing '''
	if not exists(config):
		os.makedirs(dirname(config), exist_ok=True)
		dump()

def clean():
	''' Delete the default configuration file '''
	os.remove(config)

def load(file=None):
	''' Load the settings directly in this module, from the specified file or the default one

		Keys unknown to this module are ignored
	'''
	if not file:	file = config
	if isinstance(file, str):
		with open(file, 'r') as f:
			changes = yaml.safe_load(f)
	else:
		changes = yaml.safe_load(file)
	def update(dst, src):
		for key in dst:
			if key in src:
				if isinstance(dst[key], dict) and isinstance(src[key], dict):
					update(dst[key], src[key])
				else:
					dst[key] = src[key]
	update(settings, changes or {})

def dump(file=None):
	''' Dump the current settings into the specified file or to the default one '''
	if not file:	file = config
	text = yaml.safe_dump(settings, default_flow_style=None, width=40, indent=4)
	if isinstance(file, str):
		with open(file, 'w') as f:
			f.write(text)
	else:
		file.write(text)


def getparam(levels: list, key):
	''' Get the first found value for key through the given dictionnaries.
		Dictionnaries are tested successively until the matching value is found. If no value is found, None is returned
	'''
	for d in levels:
		if d is not None:
			if key in d:	return d[key]
	return None


# automatically load settings in the file exist
try:	load()
except FileNotFoundError:	pass
