import os
import tempfile
import unittest
from unittest import mock

from click.testing import CliRunner
from schedule_fixtures import add_employee_sheet, new_workbook, save_workbook

from wochenplan import config as cfg_mod
from wochenplan.cli import cli

# Same blocks in both weeks so the output does not depend on today's week type
JANE_BLOCKS = [(1, "Monday", 0.375, 0.54167, "Office"), (1, "Thursday", 0.5, 0.75, "Home")]


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        patcher = mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": self._tmp.name})
        patcher.start()
        self.addCleanup(patcher.stop)

        wb = new_workbook()
        add_employee_sheet(wb, "JDoe", name="Jane Doe", week1=JANE_BLOCKS, week2=JANE_BLOCKS)
        add_employee_sheet(wb, "AZane", name="Amy Zane")
        add_employee_sheet(wb, "NewEmployee", name="Template", week1=JANE_BLOCKS, week2=JANE_BLOCKS)
        self.path = str(save_workbook(wb, self._tmp.name))
        self.runner = CliRunner()

    def test_week_view(self) -> None:
        result = self.runner.invoke(cli, ["woche", "--datei", self.path])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[JD] Jane Doe", result.output)
        self.assertIn("[Buero] 9:00 AM - 1:00 PM", result.output)
        self.assertIn("[Home] 12:00 PM - 6:00 PM", result.output)
        self.assertNotIn("Amy Zane", result.output)
        self.assertNotIn("Template", result.output)
        self.assertIn("1 von 2 Mitarbeitern", result.output)

    def test_week_view_office_only(self) -> None:
        result = self.runner.invoke(cli, ["woche", "--datei", self.path, "--buero", "--offset=-3"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[Buero] 9:00 AM - 1:00 PM", result.output)
        self.assertNotIn("[Home]", result.output)

    def test_office_only_from_config_can_be_overridden(self) -> None:
        cfg_mod.save_config({**cfg_mod.DEFAULT_CONFIG, "office_hours_only": True})

        result = self.runner.invoke(cli, ["woche", "--datei", self.path])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("[Home]", result.output)

        result = self.runner.invoke(cli, ["woche", "--datei", self.path, "--alle"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[Home] 12:00 PM - 6:00 PM", result.output)
        self.assertIn("[Buero] 9:00 AM - 1:00 PM", result.output)

    def test_week_view_selection_without_match(self) -> None:
        result = self.runner.invoke(cli, ["woche", "--datei", self.path, "--mitarbeiter", "Amy Zane", "--typ", "2"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("(Woche 2)", result.output)
        self.assertIn("Keine Mitarbeiter mit Arbeitszeiten", result.output)
        self.assertIn("0 von 2 Mitarbeitern", result.output)

    def test_missing_workbook(self) -> None:
        result = self.runner.invoke(cli, ["woche", "--datei", os.path.join(self._tmp.name, "nope.xlsx")])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Datei nicht gefunden", result.output)

    def test_employee_detail(self) -> None:
        result = self.runner.invoke(cli, ["mitarbeiter", "Jane Doe", "--datei", self.path])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Jane Doe - Plan", result.output)
        self.assertIn("(aktuell)", result.output)
        self.assertIn("Keine Arbeitszeit geplant", result.output)

    def test_unknown_employee(self) -> None:
        result = self.runner.invoke(cli, ["mitarbeiter", "Nobody", "--datei", self.path])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Mitarbeiter nicht gefunden", result.output)

    def test_show_config(self) -> None:
        result = self.runner.invoke(cli, ["config"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Start Woche 1: 2025-09-13", result.output)
        self.assertIn("NewEmployee, FormTools", result.output)


if __name__ == "__main__":
    unittest.main()
