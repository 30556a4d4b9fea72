"""Tests for configuration loading."""

from weatherbook.config import Config, load_config


def write_conf(tmp_path, text):
    path = tmp_path / "weatherbook.conf"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.capacity == 10

    def test_parses_keys(self, tmp_path):
        path = write_conf(
            tmp_path,
            "# Weatherbook settings\n"
            "CAPACITY=25\n"
            "log_level = debug\n"
            'TELEGRAM_BOT_TOKEN="123:abc"  # from BotFather\n'
            "TELEGRAM_ALLOWED_USERS=111, 222\n",
        )
        config = load_config(path)

        assert config.capacity == 25
        assert config.log_level == "DEBUG"
        assert config.telegram_bot_token == "123:abc"
        assert config.telegram_allowed_users == [111, 222]

    def test_unquoted_inline_comment(self, tmp_path):
        config = load_config(write_conf(tmp_path, "CAPACITY=5 # small book\n"))
        assert config.capacity == 5

    def test_invalid_capacity_keeps_default(self, tmp_path, caplog):
        config = load_config(write_conf(tmp_path, "CAPACITY=zero\n"))
        assert config.capacity == 10
        assert "CAPACITY" in caplog.text

    def test_non_positive_capacity_keeps_default(self, tmp_path):
        assert load_config(write_conf(tmp_path, "CAPACITY=0\n")).capacity == 10

    def test_skips_invalid_user_ids(self, tmp_path):
        config = load_config(write_conf(tmp_path, "TELEGRAM_ALLOWED_USERS=1,bob,3\n"))
        assert config.telegram_allowed_users == [1, 3]

    def test_ignores_lines_without_equals(self, tmp_path):
        config = load_config(write_conf(tmp_path, "garbage\nCAPACITY=3\n"))
        assert config.capacity == 3
