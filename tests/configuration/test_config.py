"""Tests for the configuration loader."""

import pytest

from config.config import ConfigLoader, load_config


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDefaults:
    def test_defaults_without_files(self, workdir):
        config = load_config()

        assert config.minio.bucket == "openneo-uploads"
        assert config.minio.region == "us-east-1"
        assert config.backup.concurrency == 20
        assert config.backup.key_retries == 5
        assert config.backup.list_retries == 10
        assert config.backup.key_timeout_seconds is None
        assert config.reset.concurrency == 30
        assert config.reset.list_timeout_seconds == 5.0


class TestSources:
    def test_yaml_values(self, workdir):
        (workdir / "config.yaml").write_text(
            "minio:\n"
            "  endpoint: localhost:9000\n"
            "  bucket: test-bucket\n"
            "  secure: false\n"
            "backup:\n"
            "  concurrency: 5\n"
            "  key_timeout_seconds: 30\n"
        )

        config = load_config()

        assert config.minio.endpoint == "localhost:9000"
        assert config.minio.bucket == "test-bucket"
        assert config.minio.secure is False
        assert config.backup.concurrency == 5
        assert config.backup.key_timeout_seconds == 30.0

    def test_env_overrides_yaml(self, workdir, monkeypatch):
        (workdir / "config.yaml").write_text("backup:\n  concurrency: 5\n")
        monkeypatch.setenv("OUTFIT_ARCHIVER_BACKUP_CONCURRENCY", "8")
        monkeypatch.setenv("OUTFIT_ARCHIVER_MINIO_SECURE", "false")
        monkeypatch.setenv("OUTFIT_ARCHIVER_BACKUP_LIST_TIMEOUT_SECONDS", "2.5")

        config = load_config()

        assert config.backup.concurrency == 8
        assert config.minio.secure is False
        assert config.backup.list_timeout_seconds == 2.5

    def test_dotenv_file(self, workdir, monkeypatch):
        monkeypatch.setenv("OUTFIT_ARCHIVER_MINIO_BUCKET", "placeholder")
        (workdir / ".env").write_text("OUTFIT_ARCHIVER_MINIO_BUCKET=from-dotenv\n")

        config = load_config()

        assert config.minio.bucket == "from-dotenv"

    def test_none_disables_timeout(self, workdir, monkeypatch):
        monkeypatch.setenv("OUTFIT_ARCHIVER_RESET_KEY_TIMEOUT_SECONDS", "none")
        assert load_config().reset.key_timeout_seconds is None


class TestValidation:
    def test_empty_bucket_rejected(self, workdir, monkeypatch):
        monkeypatch.setenv("OUTFIT_ARCHIVER_MINIO_BUCKET", "")
        (workdir / "config.yaml").write_text("minio:\n  bucket: ''\n")

        with pytest.raises(ValueError) as exc_info:
            ConfigLoader().read_config()

        assert "minio.bucket" in str(exc_info.value)
