# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

import io
import tempfile
import unittest
from contextlib import redirect_stderr
from contextlib import redirect_stdout
from pathlib import Path

from emojiregistry.main import main

from .util import SAMPLE_REGISTRY


class MainTest(unittest.TestCase):

    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self._path = Path(self._tmpdir.name) / 'emoji-test.txt'
        self._path.write_text(SAMPLE_REGISTRY, encoding='utf-8')

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def _run(self, *args: str) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            result = main(list(args))
        return result, stdout.getvalue(), stderr.getvalue()

    def test_summary(self) -> None:
        result, stdout, _stderr = self._run(str(self._path))
        self.assertEqual(result, 0)
        lines = stdout.splitlines()
        self.assertEqual(lines[0], 'Smileys & Emotion: 4')
        self.assertEqual(lines[1], 'People & Body: 2')
        self.assertEqual(lines[2], 'Total: 17')

    def test_max_age(self) -> None:
        result, stdout, _stderr = self._run(str(self._path),
                                            '--max-age', '1')
        self.assertEqual(result, 0)
        self.assertIn('Smileys & Emotion: 2', stdout.splitlines())

    def test_show(self) -> None:
        man = '\U0001F575\uFE0F\u200D\u2642\uFE0F'
        result, stdout, _stderr = self._run(str(self._path), '--show', man)
        self.assertEqual(result, 0)
        self.assertIn('  name:     man detective', stdout)
        self.assertIn('  role:     variation_base', stdout)
        self.assertEqual(stdout.count('  variant:  '), 3)
        self.assertEqual(stdout.count('  tone:     '), 2)

    def test_show_unknown(self) -> None:
        result, _stdout, stderr = self._run(str(self._path), '--show', 'A')
        self.assertEqual(result, 1)
        self.assertIn('not found', stderr)

    def test_missing_file(self) -> None:
        result, _stdout, stderr = self._run(
            str(Path(self._tmpdir.name) / 'missing.txt'))
        self.assertEqual(result, 1)
        self.assertIn('Unable to read registry file', stderr)


if __name__ == '__main__':
    unittest.main()
