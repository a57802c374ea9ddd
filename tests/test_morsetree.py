import unittest

import mock

import morsetree
from morsetree import settings, utils


class TestMorse(unittest.TestCase):

    def test_basic(self):
        mor_code = morsetree.get_mor_code("basic.mor")
        self.assertEqual(2, len(mor_code))
        self.assertEqual("... --- ...", mor_code[1])

    def test_resource_text(self):
        data = utils.get_resource("basic.mor")
        self.assertTrue(data.startswith("#"))

    def test_resource_errors(self):
        with self.assertRaises(morsetree.ProcessMorseError):
            utils.get_resource("missing.mor")

    def test_return_codes(self):
        self.assertEqual(0, morsetree.get_return_code(None))
        self.assertEqual(1, morsetree.get_return_code(ValueError()))
        self.assertEqual(
            11, morsetree.get_return_code(morsetree.ProcessMorseError()))
        self.assertEqual(
            17, morsetree.get_return_code(morsetree.SelfTestMorseError()))

    def test_logger_levels(self):
        log = morsetree.get_logger("morsetree.test", debug=True)
        self.assertEqual(utils.logging.DEBUG, log.level)
        log = morsetree.get_logger("morsetree.test", debug=False)
        self.assertEqual(utils.logging.INFO, log.level)
        log = morsetree.get_logger("morsetree.test", use_logging=False)
        self.assertEqual(utils.logging.CRITICAL, log.level)

    def test_logger_class(self):
        with mock.patch("morsetree.utils.get_logger") as mock_get_logger:
            obj = utils.Logger(debug=True)
        self.assertIs(mock_get_logger.return_value, obj.log)
        mock_get_logger.assert_called_once_with(
            utils.__file__, use_logging=settings.LOGGING, debug=True)

    def test_version(self):
        self.assertEqual(settings.VERSION, morsetree.__version__)

    def test_metadata(self):
        self.assertEqual("morsetree", settings.NAME)
        self.assertEqual("Unlicense", settings.LICENSE)
