from pathlib import Path
from tracker.main import DEFAULT_LOG_FILE, log_file_path


def test_log_file_from_environment(tmp_path, monkeypatch):
    target = tmp_path / "nested" / "tracker.log"
    monkeypatch.setenv("TRACKER_LOG_FILE", str(target))

    assert log_file_path() == target
    assert target.parent.is_dir()


def test_default_log_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TRACKER_LOG_FILE", raising=False)
    monkeypatch.chdir(tmp_path)

    assert log_file_path() == Path(DEFAULT_LOG_FILE)
    assert (tmp_path / "logs").is_dir()
