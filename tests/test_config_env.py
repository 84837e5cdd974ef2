import importlib
import os
import unittest

import flask_app.config
from flask_app import create_app


class ConfigEnvTests(unittest.TestCase):
    def setUp(self):
        self.env_keys = ['HOST', 'PORT', 'LOG_LEVEL']
        self.original_env = {k: os.environ.get(k) for k in self.env_keys}

    def tearDown(self):
        for key, value in self.original_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        importlib.reload(flask_app.config)

    def _reload_config(self):
        return importlib.reload(flask_app.config)

    def test_defaults_when_env_unset(self):
        for key in self.env_keys:
            os.environ.pop(key, None)

        config = self._reload_config()

        self.assertEqual(config.Config.HOST, '0.0.0.0')
        self.assertEqual(config.Config.PORT, 8083)
        self.assertEqual(config.Config.LOG_LEVEL, 'INFO')

    def test_env_overrides_are_parsed(self):
        os.environ['HOST'] = '127.0.0.1'
        os.environ['PORT'] = '9090'
        os.environ['LOG_LEVEL'] = 'debug'

        config = self._reload_config()

        self.assertEqual(config.Config.HOST, '127.0.0.1')
        self.assertEqual(config.Config.PORT, 9090)
        self.assertEqual(config.Config.LOG_LEVEL, 'DEBUG')

    def test_config_name_selects_config_class(self):
        self.assertTrue(create_app('testing').config['TESTING'])
        self.assertFalse(create_app('production').config['DEBUG'])
        self.assertTrue(create_app('development').config['DEBUG'])
        # Unknown names fall back to development
        self.assertTrue(create_app('staging').config['DEBUG'])


if __name__ == '__main__':
    unittest.main()
