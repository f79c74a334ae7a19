"""
CLI tests.

Drive main() end to end against a temp data dir.
"""

import re
from pathlib import Path

import pytest

from salonbook.app_shell.cli import main


def run(capsys: pytest.CaptureFixture[str], *argv: str) -> str:
    main(list(argv))
    return capsys.readouterr().out


def add(capsys: pytest.CaptureFixture[str], *argv: str) -> str:
    out = run(capsys, "add", *argv)
    match = re.search(r"ID: ([0-9a-f]+)", out)
    assert match, out
    return match.group(1)


@pytest.mark.usefixtures("cli_env")
class TestCli:
    def test_list_empty(self, capsys) -> None:
        assert "顧客が登録されていません" in run(capsys, "list")

    def test_add_and_list_grouped(self, capsys) -> None:
        add(capsys, "山田 花子", "--kana", "ヤマダ ハナコ")
        add(capsys, "加藤", "--kana", "カトウ")
        add(capsys, "Guest")

        out = run(capsys, "list")

        assert out.index("■ か行") < out.index("■ や行") < out.index("■ 他")
        assert "山田 花子" in out

    def test_search_no_match(self, capsys) -> None:
        add(capsys, "山田", "--kana", "ヤマダ")
        assert "見つかりませんでした" in run(capsys, "list", "--search", "佐藤")

    def test_visit_and_show(self, capsys) -> None:
        cid = add(capsys, "佐藤", "--kana", "サトウ", "--phone", "090-0000-0000")

        out = run(capsys, "visit", cid, "--date", "2024-07-01", "--note", "カット")
        assert "1 回" in out

        out = run(capsys, "show", cid)
        assert "090-0000-0000" in out
        assert "あと 9 回で割引です" in out
        assert "2024-07-01  カット" in out

    def test_ninth_visit_shows_discount_badge(self, capsys) -> None:
        cid = add(capsys, "鈴木", "--kana", "スズキ")
        for day in range(1, 10):
            run(capsys, "visit", cid, "--date", f"2024-07-{day:02d}")

        assert "次回 10% OFF!" in run(capsys, "show", cid)
        assert "[次回10%オフ]" in run(capsys, "list")

    def test_invalid_date_exits(self, capsys) -> None:
        cid = add(capsys, "佐藤")
        with pytest.raises(SystemExit) as exc:
            run(capsys, "visit", cid, "--date", "2024-02-30")
        assert exc.value.code == 1

    def test_delete_requires_confirmation(self, capsys) -> None:
        cid = add(capsys, "佐藤")

        with pytest.raises(SystemExit):
            run(capsys, "delete", cid)
        assert "佐藤" in run(capsys, "list")

        assert "削除しました" in run(capsys, "delete", cid, "--yes")
        assert "顧客が登録されていません" in run(capsys, "list")

    def test_delete_unknown_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            run(capsys, "delete", "deadbeef", "--yes")
        assert exc.value.code == 1

    def test_export_history_writes_file(self, capsys, tmp_path: Path) -> None:
        cid = add(capsys, "佐藤")
        run(capsys, "visit", cid, "--date", "2024-07-01", "--note", 'Cut "short"')

        run(capsys, "export-history", cid, "--out", str(tmp_path / "out"))

        payload = (tmp_path / "out" / "佐藤_施術記録.csv").read_bytes()
        assert payload.decode("utf-8-sig") == '日付,施術内容\n2024-07-01,"Cut ""short"""'

    def test_export_history_without_visits_exits(self, capsys, tmp_path: Path) -> None:
        cid = add(capsys, "佐藤")
        with pytest.raises(SystemExit):
            run(capsys, "export-history", cid, "--out", str(tmp_path))

    def test_export_all(self, capsys, tmp_path: Path) -> None:
        add(capsys, "佐藤", "--kana", "サトウ")

        out = run(capsys, "export-all", "--out", str(tmp_path))

        files = list(tmp_path.glob("全顧客リスト_*.csv"))
        assert len(files) == 1
        assert "1 customers" in out
        assert files[0].read_bytes().decode("utf-8-sig").startswith("お客様ID,お名前")

    def test_export_all_empty_exits(self, capsys, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            run(capsys, "export-all", "--out", str(tmp_path))


def test_missing_rules_file_exits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from salonbook.app_shell.config import get_settings

    monkeypatch.setenv("SALON_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SALON_RULES_PATH", str(tmp_path / "missing.yaml"))
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit):
            main(["list"])
    finally:
        get_settings.cache_clear()


def test_malformed_rules_file_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    from salonbook.app_shell.config import get_settings

    rules_path = tmp_path / "salon.yaml"
    rules_path.write_text("loyalty:\n  discount_interval: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("SALON_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("SALON_RULES_PATH", str(rules_path))
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as exc:
            main(["list"])
        assert exc.value.code == 1
        assert "Invalid configuration" in caplog.text
    finally:
        get_settings.cache_clear()


def test_out_of_range_rules_exit(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    from salonbook.app_shell.config import get_settings

    rules_path = tmp_path / "salon.yaml"
    rules_path.write_text("loyalty:\n  discount_interval: 0\n", encoding="utf-8")
    monkeypatch.setenv("SALON_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("SALON_RULES_PATH", str(rules_path))
    get_settings.cache_clear()
    try:
        with pytest.raises(SystemExit) as exc:
            main(["list"])
        assert exc.value.code == 1
    finally:
        get_settings.cache_clear()
