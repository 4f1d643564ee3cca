from __future__ import annotations

import io
import json
from pathlib import Path
import tempfile
import unittest

from PIL import Image

from makeplot.cli import build_parser, main


class MakeplotCliTests(unittest.TestCase):
    def _run(self, argv: list[str], payload: str) -> tuple[int, bytes, str]:
        stdout = io.BytesIO()
        stderr = io.StringIO()
        code = main(argv, stdin=io.StringIO(payload), stdout=stdout, stderr=stderr)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_parser_mirrors_plugin_flags(self) -> None:
        args = build_parser().parse_args(["--width", "320", "--height", "200", "-t", "sine"])
        self.assertEqual((args.width, args.height, args.title), (320, 200, "sine"))
        self.assertIsNone(args.out)

    def test_list_input_writes_png_to_stdout(self) -> None:
        code, out, err = self._run([], json.dumps([0, 1, 4, 9, 16]))
        self.assertEqual(code, 0, err)
        with Image.open(io.BytesIO(out)) as image:
            self.assertEqual(image.size, (640, 480))

    def test_table_input_with_options(self) -> None:
        payload = json.dumps([{"x": 0, "y": 0}, {"x": 1, "y": 1}])
        code, out, err = self._run(["--width", "100", "--height", "50", "--title", "t"], payload)
        self.assertEqual(code, 0, err)
        with Image.open(io.BytesIO(out)) as image:
            self.assertEqual(image.size, (100, 50))

    def test_input_and_out_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "values.json"
            dst = Path(tmp) / "plot.png"
            src.write_text(json.dumps([1.5, 2.5, 2.0]), encoding="utf-8")
            code, out, err = self._run(["--input", str(src), "--out", str(dst)], "")
            self.assertEqual(code, 0, err)
            self.assertEqual(out, b"")
            self.assertGreater(dst.stat().st_size, 0)

    def test_missing_input_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "absent.json"
            code, out, err = self._run(["--input", str(missing)], "")
        self.assertEqual(code, 1)
        self.assertEqual(out, b"")
        self.assertIn("error: Cannot read input:", err)
        self.assertIn(f"(at {missing})", err)

    def test_non_utf8_input_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "values.json"
            src.write_bytes(b"[1, 2, \xff]")
            code, _, err = self._run(["--input", str(src)], "")
        self.assertEqual(code, 1)
        self.assertIn("error: Cannot read input: input is not valid UTF-8", err)

    def test_out_path_in_missing_directory_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            dst = Path(tmp) / "no-such-dir" / "plot.png"
            code, out, err = self._run(["--out", str(dst)], "[1, 2, 3]")
            self.assertFalse(dst.exists())
        self.assertEqual(code, 1)
        self.assertEqual(out, b"")
        self.assertIn("error: Cannot write output:", err)
        self.assertIn(f"(at {dst})", err)

    def test_missing_field_is_reported_with_label_and_location(self) -> None:
        code, out, err = self._run([], json.dumps([{"x": 0, "y": 0}, {"y": 1}]))
        self.assertEqual(code, 1)
        self.assertEqual(out, b"")
        self.assertIn("error: Missing x value: Missing x value from record 1", err)
        self.assertIn("(at stdin)", err)

    def test_invalid_json_is_an_input_error(self) -> None:
        code, out, err = self._run([], "[1, 2,")
        self.assertEqual(code, 1)
        self.assertIn("Invalid JSON input", err)

    def test_top_level_object_is_rejected(self) -> None:
        code, _, err = self._run([], json.dumps({"x": 1, "y": 2}))
        self.assertEqual(code, 1)
        self.assertIn("Incorrect input type", err)

    def test_invalid_width_is_rejected(self) -> None:
        code, _, err = self._run(["--width", "0"], "[1, 2]")
        self.assertEqual(code, 1)
        self.assertIn("Invalid option", err)

    def test_render_failure_is_reported(self) -> None:
        code, _, err = self._run(["--width", "1", "--height", "1"], "[1, 2]")
        self.assertEqual(code, 1)
        self.assertIn("error: Failed to build chart:", err)


if __name__ == "__main__":
    unittest.main()
