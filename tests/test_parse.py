# SPDX-License-Identifier: MIT

import unittest

import pendulum
import typer

from heatday.terminal.parse import parse_datetime, parse_id_list


class TestParseIdList(unittest.TestCase):
    def test_single_list_and_range(self) -> None:
        self.assertEqual(parse_id_list("3"), [3])
        self.assertEqual(parse_id_list("4, 1"), [1, 4])
        self.assertEqual(parse_id_list("1,3-5,4,8"), [1, 3, 4, 5, 8])

    def test_rejects_bad_input(self) -> None:
        for value in ["", "a", "5-2", "1-2-3", "1-x"]:
            with self.subTest(value=value):
                with self.assertRaises(typer.BadParameter):
                    parse_id_list(value)


class TestParseDatetime(unittest.TestCase):
    def test_iso_date_is_local_midnight(self) -> None:
        parsed = parse_datetime("2026-10-25")

        assert parsed is not None
        self.assertEqual(parsed.timezone_name, "UTC")
        self.assertEqual(
            parsed, pendulum.datetime(2026, 10, 25, tz="local").in_tz("UTC")
        )

    def test_day_offset(self) -> None:
        parsed = parse_datetime("2")

        assert parsed is not None
        self.assertEqual(parsed, pendulum.today("local").add(days=2).in_tz("UTC"))

    def test_none_and_garbage(self) -> None:
        self.assertIsNone(parse_datetime(None))
        with self.assertRaises(typer.BadParameter):
            parse_datetime("someday")
        with self.assertRaises(typer.BadParameter):
            parse_datetime("25:00")


if __name__ == "__main__":
    unittest.main(verbosity=2)
