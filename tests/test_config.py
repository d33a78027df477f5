from app.core.config import Settings


def test_cors_origins_accept_json_and_csv():
    assert Settings(CORS_ORIGINS='["http://a", "http://b"]').CORS_ORIGINS == ["http://a", "http://b"]
    assert Settings(CORS_ORIGINS="http://a, http://b").CORS_ORIGINS == ["http://a", "http://b"]


def test_database_uri_defaults_to_mysql(monkeypatch):
    monkeypatch.delenv("DATABASE_URI", raising=False)
    settings = Settings(DB_USER="u", DB_PASSWORD="p", DB_HOST="db", DB_PORT="3306", DB_NAME="students")

    assert settings.SQLALCHEMY_DATABASE_URI == "mysql+pymysql://u:p@db:3306/students"


def test_explicit_database_uri_wins():
    assert Settings(DATABASE_URI="sqlite://").SQLALCHEMY_DATABASE_URI == "sqlite://"


def test_cors_origins_from_environment_accept_csv(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a,http://b")

    assert Settings().CORS_ORIGINS == ["http://a", "http://b"]


def test_cors_origins_from_environment_accept_json(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://a", "http://b"]')

    assert Settings().CORS_ORIGINS == ["http://a", "http://b"]
