import logging

import pytest

from pyoptini import Options


class TestOptions:
    def test_get_section_idempotent(self):
        root = Options()
        mesh = root.get_section('mesh')
        assert root.get_section('mesh') is mesh
        assert mesh.name == 'mesh'
        assert mesh.parent is root
        assert root.has_section('mesh')

    def test_set_and_get(self):
        opts = Options()
        opts.set('nx', '68', 'BOUT.inp')
        assert opts['nx'] == '68'
        assert opts.source_of('nx') == 'BOUT.inp'
        assert opts.entry('nx') == {'value': '68', 'source': 'BOUT.inp'}

    def test_overwrite(self):
        opts = Options()
        opts.set('nx', '68', 'a.inp')
        opts.set('nx', '132', 'b.inp')
        assert len(opts) == 1
        assert opts['nx'] == '132'
        assert opts.source_of('nx') == 'b.inp'

    def test_overwrite_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='pyoptini')
        opts = Options('mesh')
        opts.set('nx', '68', 'a.inp')
        opts.set('nx', '132', 'b.inp')
        assert '[mesh] nx: "68" (a.inp) overridden by "132" (b.inp)' \
            in caplog.text

    def test_mapping_protocol(self):
        opts = Options()
        opts['a'] = '1'
        opts['b'] = '2'
        assert opts.source_of('a') == ''
        assert list(opts) == ['a', 'b']
        assert 'a' in opts and 'c' not in opts
        del opts['a']
        assert opts.to_dict() == {'b': '2'}
        with pytest.raises(KeyError):
            opts['a']

    def test_sections_separate_from_values(self):
        opts = Options()
        opts.get_section('mesh')
        assert len(opts) == 0
        assert list(opts.sections()) == ['mesh']
        assert 'mesh' not in opts

    def test_str_repr(self):
        opts = Options('solver')
        opts['type'] = 'PETSC'
        assert str(opts) == '[solver]'
        assert repr(opts) == '[solver] { .cnt = 1, .sections = 0 }'
