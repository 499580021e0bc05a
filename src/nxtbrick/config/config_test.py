import os
import sys
import unittest
from unittest.mock import Mock, patch

from configobj import ConfigObj, ConfigObjError
from hamcrest import assert_that, is_, equal_to, has_property, is_not, calling, raises

from nxtbrick.config.config import configure_module, config_filename, config_flavor, load_config_file_base, \
    load_config, reconstruct_name, fq_module_name, map_os_name, fetch_conf_path, apply_conf_path, apply_conf, \
    load_configspec_file

config_name = 'config_test'
value1 = None
value2 = None
value3 = None
value4 = None

this_module = sys.modules[__name__]


class ConfigTestCase(unittest.TestCase):

    def test_config_file_not_found(self):
        assert_that(calling(load_config_file_base).with_args('blah'), raises(IOError))

    def test_config_file_optional(self):
        assert_that(load_config_file_base('blah', must_exist=False), is_(equal_to({})))

    def test_config_file_invalid_schema(self):
        path = os.path.dirname(__file__)
        assert_that(calling(load_config).with_args('config_test_invalid_schema', path),
                    raises(ConfigObjError, "the config file config_test_invalid_schema failed validation"))

    def test_schema_checks_with_several_arguments(self):
        path = os.path.dirname(__file__)
        with patch('nxtbrick.config.config.user_config_filename', return_value=os.path.join(path, 'missing.cfg')):
            conf = load_config('config_test_checks', path)
        assert_that(conf['count'], is_(7))
        assert_that(conf['ratio'], is_(0.5))
        assert_that(conf['name'], is_('auto'))

    def test_load_configspec_keeps_checks_whole(self):
        path = os.path.dirname(__file__)
        spec = load_configspec_file(os.path.join(path, 'config_test_checks.schema.cfg'))
        assert_that(spec['count'], is_('integer(min=0, max=10, default=1)'))
        assert_that(load_configspec_file(os.path.join(path, 'missing.cfg')), is_(equal_to({})))

    def test_interface_schema_validates(self):
        path = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'interface')
        with patch('nxtbrick.config.config.user_config_filename', return_value=os.path.join(path, 'missing.cfg')):
            conf = load_config('nxtbrick', path)
        assert_that(conf['nxtbrick']['interface']['usb']['vendor_id'], is_(0x0694))
        assert_that(conf['nxtbrick']['interface']['tcp']['host'], is_(None))

    def test_config_file_invalid_syntax(self):
        path = os.path.dirname(__file__)
        assert_that(calling(load_config_file_base).with_args(os.path.join(path, 'config_test_invalid_syntax.cfg')),
                    raises(ConfigObjError, "Section too nested at line 1. at .*config_test_invalid_syntax.cfg"))

    def test_can_retrieve_config_file(self):
        name = config_flavor(config_name, "default")
        file = config_filename(name, os.path.dirname(this_module.__file__))
        assert_that(os.path.exists(file), is_(True),
                    "expected config path %s to exist" % file)

    def test_config_flavor(self):
        assert_that(config_flavor('nxtbrick'), is_('nxtbrick'))
        assert_that(config_flavor('nxtbrick', 'schema'), is_('nxtbrick.schema'))

    def test_can_apply_module(self):
        configure_module(this_module)
        assert_that(value1, is_(equal_to('def')))
        assert_that(value2, is_(equal_to(['1', '2', '3'])))
        assert_that(value3, is_(4))
        assert_that(value4, is_(50))
        assert_that(this_module, is_not(has_property("missing_value")))

    def test_configure_module_alternative_name(self):
        configure_module(this_module, 'config_test_alt')
        assert_that(value3, is_('alt'))

    def test_reconstruct_name(self):
        assert_that(reconstruct_name('C:/drive/dir/package1/package2/module.py', 2), is_('package1.package2.module'))
        assert_that(reconstruct_name('C:\\drive\\dir\\module.py', 0), is_('module'))

    def test_fq_module_name_with_name(self):
        module = Mock()
        module.__name__ = 'one.two.three'
        module.__package__ = 'one.two'
        assert_that(fq_module_name(module), is_('one.two.three'))

    def test_fq_module_name_as_main(self):
        module = Mock()
        module.__name__ = '__main__'
        module.__package__ = 'one.two'
        module.__file__ = '/some/place/one/two/three.py'
        assert_that(fq_module_name(module), is_('one.two.three'))

    def test_fq_module_name_no_package(self):
        module = Mock()
        module.__package__ = None
        assert_that(calling(fq_module_name).with_args(module), raises(ConfigObjError, '.*no package'))

    def test_map_os_name(self):
        assert_that(map_os_name('Windows'), is_('windows'))
        assert_that(map_os_name('Linux'), is_('linux'))
        assert_that(map_os_name('Darwin'), is_('osx'))

    def test_non_existent_config_path(self):
        sut = ConfigObj()
        assert_that(fetch_conf_path(sut, ['abcd']), is_(None))

    def test_non_existent_apply_config_path_leaves_target(self):
        sut = ConfigObj()
        target = Mock(spec=['value'])
        target.value = 1
        apply_conf_path(sut, ['abcd'], target)
        assert_that(target.value, is_(1))

    def test_apply_conf_only_sets_known_values(self):
        conf = ConfigObj({'value': 2, 'other': 3, 'section': {'value': 4}})

        class Target:
            value = 1
            section = None

        target = Target()
        apply_conf(conf, target)
        assert_that(target.value, is_(2))
        assert_that(target.section, is_(None))
        assert_that(target, is_not(has_property('other')))


if __name__ == '__main__':  # pragma no cover
    unittest.main()
