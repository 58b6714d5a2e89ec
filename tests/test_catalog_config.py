"""
Tests for configuration and catalog loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tintscheduler.catalog import Catalog
from tintscheduler.config import AppConfig, BusinessHoursConfig

from conftest import build_catalog


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.timezone == "UTC"
        assert config.business_hours.open_hour == 8
        assert config.business_hours.close_hour == 17
        assert config.business_hours.slot_interval_minutes == 30
        assert not config.strict_service_ids
        assert not config.strict_availability_minutes

    def test_invalid_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            AppConfig(timezone="Mars/Olympus_Mons")

    def test_log_level_normalised(self):
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_business_hours_order(self):
        """Test that the window must open before it closes."""
        with pytest.raises(ValidationError, match="close_hour must be later"):
            BusinessHoursConfig(open_hour=12, close_hour=9)

    def test_business_hours_interval(self):
        with pytest.raises(ValidationError):
            BusinessHoursConfig(slot_interval_minutes=7)

    def test_load_from_yaml(self, tmp_path: Path):
        """Test loading config and resolving a relative catalog path."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "timezone: America/Chicago\n"
            "strict_service_ids: true\n"
            "catalog_file: catalog.yaml\n"
            "business_hours:\n"
            "  open_hour: 9\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(config_file)

        assert config.timezone == "America/Chicago"
        assert config.strict_service_ids
        assert config.business_hours.open_hour == 9
        assert config.catalog_file == tmp_path / "catalog.yaml"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("timezone: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_file)

    def test_root_must_be_mapping(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            AppConfig.load_from_yaml(config_file)

    def test_load_or_default_without_file(self, tmp_path: Path, monkeypatch):
        """Without an explicit path and no config.yaml around, defaults are used."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            "tintscheduler.config.get_default_config_path",
            lambda: tmp_path / "config.yaml",
        )

        assert AppConfig.load_or_default() == AppConfig()

    def test_load_or_default_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_or_default(tmp_path / "missing.yaml")


class TestCatalog:
    """Tests for Catalog validation and loading."""

    def test_bundled_catalog(self):
        """Test the catalog shipped with the package."""
        catalog = Catalog.load_default()

        assert catalog.durations() == {"1": 30, "2": 20, "3": 45, "4": 15, "5": 60}
        assert len(catalog.packages) == 3
        assert [t.name for t in catalog.technicians] == ["John Smith", "Jane Doe", "Mike Johnson"]
        assert catalog.vehicles.types[0] == "Sedan"

    def test_load_default_via_config(self):
        assert AppConfig().load_catalog() == Catalog.load_default()

    def test_weekdays_filled_and_ordered(self, catalog):
        """Test that missing weekdays become days off, ordered Sunday first."""
        jane = catalog.technicians[1]

        assert list(jane.availability) == [
            "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
        ]
        assert jane.availability["saturday"].start == ""

    def test_unknown_weekday_rejected(self):
        with pytest.raises(ValidationError, match="Unknown weekday"):
            build_catalog(technicians=[{"id": "1", "name": "X", "availability": {"funday": {}}}])

    def test_bad_clock_rejected(self):
        with pytest.raises(ValidationError):
            build_catalog(
                technicians=[
                    {"id": "1", "name": "X", "availability": {"monday": {"start": "8am", "end": "16:00"}}}
                ]
            )

    def test_duplicate_service_ids_rejected(self):
        service = {"id": "1", "name": "A", "estimated_time": 10}
        with pytest.raises(ValidationError, match="Duplicate service id"):
            build_catalog(services=[service, service], packages=[])

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            build_catalog(services=[{"id": "1", "name": "A", "estimated_time": -1}], packages=[])

    def test_package_must_reference_known_services(self):
        with pytest.raises(ValidationError, match="unknown service"):
            build_catalog(packages=[{"id": "1", "name": "P", "services": [{"service_id": "42"}]}])

    def test_roster_conversion(self, catalog):
        roster = catalog.roster()

        assert set(roster) == {"1", "2"}
        assert roster["1"].hours_for("monday").start == "08:00"
        assert not roster["1"].hours_for("sunday").is_working_day()

    def test_load_from_yaml(self, tmp_path: Path):
        catalog_file = tmp_path / "catalog.yaml"
        catalog_file.write_text(
            "services:\n"
            "  - {id: a, name: Windshield Strip, estimated_time: 40}\n",
            encoding="utf-8",
        )

        assert Catalog.load_from_yaml(catalog_file).durations() == {"a": 40}
