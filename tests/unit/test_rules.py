from pathlib import Path

import pytest

from salonbook.app_shell.config import Settings, validate_ops_rules
from salonbook.rules.loader import load_rules
from salonbook.rules.models import SalonRules

PROJECT_ROOT = Path(__file__).parent.parent.parent


def write(tmp_path: Path, text: str, name: str = "salon.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadRules:
    def test_project_rules_file_is_valid(self) -> None:
        rules = load_rules(PROJECT_ROOT / "salon.yaml")
        assert rules.loyalty.discount_interval == 10
        assert rules.loyalty.discount_percent == 10
        assert rules.export.line_terminator == "\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_rules(write(tmp_path, "")) == SalonRules()

    def test_partial_file_keeps_defaults(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, "loyalty:\n  discount_interval: 5\n"))
        assert rules.loyalty.discount_interval == 5
        assert rules.loyalty.discount_percent == 10

    def test_crlf_terminator(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, 'export:\n  line_terminator: "\\r\\n"\n'))
        assert rules.export.line_terminator == "\r\n"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write(tmp_path, "loyalty: [unclosed\n"))

    def test_schema_violation(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write(tmp_path, "loyalty:\n  discount_interval: 0\n"))

    def test_fenced_yaml_in_markdown(self, tmp_path: Path) -> None:
        text = "# Salon rules\n\n```yaml\nloyalty:\n  discount_percent: 20\n```\n\nNotes.\n"
        rules = load_rules(write(tmp_path, text, "rules.md"))
        assert rules.loyalty.discount_percent == 20


class TestValidateOpsRules:
    def test_creates_data_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SALON_DATA_DIR", str(tmp_path / "new" / "data"))
        settings = Settings()

        validate_ops_rules(SalonRules(), settings)

        assert (tmp_path / "new" / "data").is_dir()

    def test_rejects_db_filename_with_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SALON_DATA_DIR", str(tmp_path))
        rules = SalonRules.model_validate({"storage": {"db_filename": "../elsewhere.db"}})

        with pytest.raises(SystemExit):
            validate_ops_rules(rules, Settings())

    def test_db_path_inside_data_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SALON_DATA_DIR", str(tmp_path))
        assert Settings().db_path(SalonRules()) == str(tmp_path / "salon.db")
