import io
import unittest

import mock

from morsetree import cli, codec


class TestCli(unittest.TestCase):

    def _run(self, *argv):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout, \
                mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            code = cli.main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_encode(self):
        code, out, _ = self._run("encode", "sos", "ET")
        self.assertEqual(0, code)
        self.assertEqual("... --- ... \n. - \n", out)

    def test_decode(self):
        code, out, _ = self._run("decode", "...", "---", "-.-", "-")
        self.assertEqual(0, code)
        self.assertEqual("SOKT\n", out)

    def test_decode_gap(self):
        code, out, _ = self._run("decode", "..--", ".....")
        self.assertEqual(0, code)
        self.assertEqual("??\n", out)

    def test_debug(self):
        code, out, _ = self._run("-d", "decode", ".-")
        self.assertEqual(0, code)
        self.assertEqual("A\n", out)

    def test_usage(self):
        code, out, err = self._run()
        self.assertEqual(cli.NO_COMMAND, code)
        self.assertEqual("", out)
        self.assertIn("Usage:", err)
        self.assertIn("\t\tA    .- N    -.", err)
        self.assertIn("H V F ? L ? P J B X C Y Z Q ? ?", err)

    def test_bad_command(self):
        code, _, err = self._run("translate", "SOS")
        self.assertEqual(cli.BAD_COMMAND, code)
        self.assertIn("Usage:", err)

    def test_invalid_letter(self):
        code, out, err = self._run("encode", "A1")
        self.assertEqual(14, code)
        self.assertEqual(".- ", out)
        self.assertIn("error:", err)

    def test_invalid_code(self):
        code, _, err = self._run("decode", ".X.")
        self.assertEqual(15, code)
        self.assertIn("'X'", err)

    def test_self_test_failure(self):
        with mock.patch.object(codec.Codec, "self_test", return_value=False):
            code, out, _ = self._run("encode", "SOS")
        self.assertEqual(17, code)
        self.assertEqual("", out)

    def test_tree(self):
        tree = cli.get_tree(codec.get_codec()).splitlines()
        self.assertEqual(5, len(tree))
        self.assertIn("<-- * -->", tree[0])
        self.assertEqual(["E", "T"], tree[1].split())
        self.assertEqual(list("IANM"), tree[2].split())
        self.assertEqual(list("SURWDKGO"), tree[3].split())

    def test_decode_dash_codes(self):
        code, out, _ = self._run("decode", "--", "---")
        self.assertEqual(0, code)
        self.assertEqual("MO\n", out)
        code, out, _ = self._run("-d", "decode", "--")
        self.assertEqual(0, code)
        self.assertEqual("M\n", out)

    def test_split_args(self):
        self.assertEqual((["-d"], "decode", ["--", "-.-"]),
                         cli.split_args(["-d", "decode", "--", "-.-"]))
        self.assertEqual(([], None, []), cli.split_args([]))
