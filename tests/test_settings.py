import io
from copy import deepcopy
from pytest import fixture

from linkarm import settings


@fixture
def restore():
	saved = deepcopy(settings.settings)
	yield
	for key, values in saved.items():
		settings.settings[key].update(values)

def test_dump_load(restore, tmp_path):
	file = str(tmp_path / 'linkarm.yaml')
	settings.solver['maxiter'] = 42
	settings.dump(file)
	settings.solver['maxiter'] = 1
	settings.load(file)
	assert settings.solver['maxiter'] == 42
	assert settings.chain['lengths'] == [1., 1., 1., 1.]

def test_partial_load(restore):
	settings.load(io.StringIO('solver:\n    precision: 0.01\nunknown: 3\n'))
	assert settings.solver['precision'] == 0.01
	assert settings.solver['maxiter'] == 10
	assert 'unknown' not in settings.settings

def test_install(restore, tmp_path, monkeypatch):
	config = str(tmp_path / 'config' / 'linkarm.yaml')
	monkeypatch.setattr(settings, 'config', config)
	settings.install()
	settings.solver['precision'] = 1.
	settings.load()
	assert settings.solver['precision'] == 1e-3
	settings.clean()

def test_getparam():
	assert settings.getparam([None, {'a': 1}, {'a': 2}], 'a') == 1
	assert settings.getparam([{'b': 1}], 'a') is None
