import pytest

from taskboard.db import ConfigurationError, database_url, establish_connection


@pytest.fixture
def clean_env(monkeypatch):
    # Setting first makes monkeypatch restore the variable's absence afterwards.
    monkeypatch.setenv("DATABASE_URL", "unused")
    monkeypatch.delenv("DATABASE_URL")
    return monkeypatch


def test_database_url_from_environment(clean_env, tmp_path):
    target = str(tmp_path / "board.db")
    clean_env.setenv("DATABASE_URL", target)
    assert database_url(tmp_path / "missing.env") == target


def test_database_url_missing_raises(clean_env, tmp_path):
    with pytest.raises(ConfigurationError, match="DATABASE_URL must be set"):
        database_url(tmp_path / "missing.env")


def test_database_url_from_env_file(clean_env, tmp_path):
    target = str(tmp_path / "from_file.db")
    env_file = tmp_path / ".env"
    env_file.write_text(f"DATABASE_URL={target}\n")
    assert database_url(env_file) == target


def test_environment_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"DATABASE_URL={tmp_path / 'file.db'}\n")
    preset = str(tmp_path / "preset.db")
    clean_env.setenv("DATABASE_URL", preset)
    assert database_url(env_file) == preset


def test_establish_connection_opens_database(tmp_path, capsys):
    path = str(tmp_path / "board.db")
    conn = establish_connection(path)
    try:
        assert conn.execute("SELECT 1").fetchone() == (1,)
    finally:
        conn.close()
    assert capsys.readouterr().out == f"Connecting to database at: {path}\n"
    assert (tmp_path / "board.db").exists()


def test_establish_connection_uses_configured_url(clean_env, tmp_path, capsys):
    path = str(tmp_path / "configured.db")
    clean_env.setenv("DATABASE_URL", path)
    conn = establish_connection()
    try:
        conn.execute("CREATE TABLE probe (value INTEGER)")
        conn.execute("INSERT INTO probe (value) VALUES (42)")
        assert conn.execute("SELECT value FROM probe").fetchone() == (42,)
    finally:
        conn.close()
    assert capsys.readouterr().out == f"Connecting to database at: {path}\n"
    assert (tmp_path / "configured.db").exists()


def test_establish_connection_failure(tmp_path):
    bad = str(tmp_path / "no_such_dir" / "board.db")
    with pytest.raises(ConnectionError, match="Error connecting to"):
        establish_connection(bad)